

class BaseException(Exception):
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg


class RedeemScriptError(BaseException):
    pass

class IncorrectQuorumError(RedeemScriptError):
    def __init__(self, msg='Not enough keys for the quorum.'):
        super().__init__(msg)

class NoQuorumError(RedeemScriptError):
    def __init__(self, msg='Quorum was not set.'):
        super().__init__(msg)

class NotEnoughPublicKeysError(RedeemScriptError):
    def __init__(self, msg='Not enough public keys. At least one public key must be specified.'):
        super().__init__(msg)

class NotStandardError(RedeemScriptError):
    def __init__(self, msg='Given script is not the standard redeem script.'):
        super().__init__(msg)


class InputSignatureError(BaseException):
    pass

class TxnDeserializationError(BaseException):
    pass

class ScriptError(BaseException):
    pass
