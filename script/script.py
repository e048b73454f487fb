import binascii
import logging
import os
import struct

from utils.Errors import ScriptError

from . import opcodes

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)

# two main classes in this package
__all__ = ['Builder', 'Tokenizer', 'encode_script_num']


# ————————————————————tool functions———————————————————————

def encode_script_num(value: int) -> bytes:
    """Minimal little-endian sign-magnitude encoding used for numbers in scripts."""
    if value == 0:
        return b''

    negative = value < 0
    value = abs(value)
    vector = bytearray()
    while value:
        vector.append(value & 0xff)
        value >>= 8

    # the sign lives in the high bit of the last byte
    if vector[-1] & 0x80:
        vector.append(0x80 if negative else 0x00)
    elif negative:
        vector[-1] |= 0x80

    return bytes(vector)


# ————————————————————script builder——————————————————————————

class Builder(object):
    """
    Accumulates opcodes and pushes into a serialized script, e.g. a 1-of-1 multisig:

        Builder().push_int(1).push_slice(pubkey).push_int(1).push_opcode(opcodes.OP_CHECKMULTISIG).into_script()
    """

    def __init__(self):
        self._script = bytearray()

    def push_opcode(self, opcode: int) -> 'Builder':
        self._script.append(opcode)
        return self

    def push_int(self, value: int) -> 'Builder':
        # small integers have dedicated opcodes, everything else is a number push
        if value == -1:
            return self.push_opcode(opcodes.OP_1NEGATE)
        if 0 <= value <= 16:
            return self.push_opcode(opcodes.encode_small_int(value))
        return self.push_slice(encode_script_num(value))

    def push_slice(self, data: bytes) -> 'Builder':
        size = len(data)
        if size < opcodes.OP_PUSHDATA1:
            self._script.append(size)
        elif size <= 0xff:
            self._script.append(opcodes.OP_PUSHDATA1)
            self._script += struct.pack('<B', size)
        elif size <= 0xffff:
            self._script.append(opcodes.OP_PUSHDATA2)
            self._script += struct.pack('<H', size)
        elif size <= 0xffffffff:
            self._script.append(opcodes.OP_PUSHDATA4)
            self._script += struct.pack('<I', size)
        else:
            raise ScriptError('Can not push more than 4GiB of data into a script.')
        self._script += data
        return self

    def into_script(self) -> bytes:
        return bytes(self._script)


# ————————————————————tool class producing tokens[]——————————————————————————

# test examples:
# >>> print(Tokenizer(bytes.fromhex('76a914d64b71729a504d23d94888d3f712d55753d5d62288ac')))
# OP_DUP OP_HASH160 d64b71729a504d23d94888d3f712d55753d5d622 OP_EQUALVERIFY OP_CHECKSIG


class Tokenizer(object):
    """
    Tokenize a script into (opcode, bytes, value) instructions.

    Push operations (including OP_0) become OP_LITERAL tokens whose value is
    the pushed data; every other opcode keeps its own value and has no data.
    """

    OP_LITERAL = 0x1ff

    ### Init part
    def __init__(self, script: bytes):
        self._script = bytes(script)
        self._tokens = []
        self._process(self._script)

    # Get the original bytes used for the opcode and value
    def get_bytes(self, index) -> bytes:
        return self._tokens[index][1]

    # Get the pushed data for a literal.
    def get_value(self, index) -> bytes:
        return self._tokens[index][2]

    def is_push(self, index) -> bool:
        return self._tokens[index][0] == Tokenizer.OP_LITERAL

    # Internal function which parse the script into tokens
    def _process(self, script: bytes):
        """Parse the script into tokens.
        :param script: The script to parse
        """
        while script:
            opcode = script[0]
            opcode_bytes = script[:1]
            script = script[1:]
            value = None

            if opcode == opcodes.OP_0:
                value = b''
                opcode = Tokenizer.OP_LITERAL

            elif 1 <= opcode <= opcodes.OP_PUSHDATA4:
                pushdata_length = opcode
                if opcodes.OP_PUSHDATA1 <= opcode <= opcodes.OP_PUSHDATA4:
                    op_length = [1, 2, 4][opcode - opcodes.OP_PUSHDATA1]
                    if len(script) < op_length:
                        raise ScriptError('The pushdata opcode is truncated')
                    pushdata_length = int.from_bytes(script[:op_length], 'little')
                    opcode_bytes += script[:op_length]
                    script = script[op_length:]

                # The data to be pushed
                value = script[:pushdata_length]
                opcode_bytes += value
                # Remove the data to be pushed from the script
                script = script[pushdata_length:]
                if len(value) != pushdata_length:
                    raise ScriptError('The pushdata opcode does not match the length of the data to be pushed')
                opcode = Tokenizer.OP_LITERAL

            self._tokens.append((opcode, opcode_bytes, value))

    def __len__(self):
        return len(self._tokens)

    def __getitem__(self, name):
        return self._tokens[name][0]

    def __iter__(self):
        for (opcode, bytes, value) in self._tokens:
            yield opcode

    def __str__(self):
        output = []
        for (opcode, bytes, value) in self._tokens:
            if opcode == Tokenizer.OP_LITERAL:
                output.append(binascii.hexlify(value).decode() if value else 'OP_0')
            else:
                output.append(opcodes.get_opcode_name(opcode))
        return " ".join(output)
