"""
Segwit multisig transaction utilities.

Usage:
  TxUtils.py keygen [--network=<net>]
  TxUtils.py redeem-script <quorum> <pubkey>... [--network=<net>]
  TxUtils.py decode <redeem_script> [--network=<net>]
  TxUtils.py address p2wpk <pubkey> [--network=<net>]
  TxUtils.py address p2wsh <redeem_script> [--network=<net>]
  TxUtils.py (-h | --help)

Options:
  -h --help          Show this screen.
  --network=<net>    bitcoin, testnet or regtest [default: testnet].
"""
import logging
import os
import sys

import ecdsa
from docopt import docopt

from params.Params import Params
from script.multisig import RedeemScript, RedeemScriptBuilder
from script.script import Tokenizer
from sign import p2wpk, p2wsh
from utils.Errors import BaseException
from utils.Utils import Utils
from wallet.Wallet import Wallet

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


def run(args) -> str:
    network = args['--network']
    if network not in Params.NETWORKS:
        raise ValueError(f'Unknown network: {network}')

    if args['keygen']:
        public_key, secret_key = Wallet.init_wallet()()
        return (f'public key: {Utils.to_hex(Wallet.compressed(public_key))}\n'
                f'secret key: {Wallet.secret_key_to_wif(secret_key, network)}')

    if args['redeem-script']:
        public_keys = [Wallet.public_key_from_bytes(Utils.from_hex(k)) for k in args['<pubkey>']]
        redeem_script = RedeemScriptBuilder.with_public_keys(public_keys) \
            .quorum(int(args['<quorum>'])) \
            .to_script()
        return (f'redeem script: {redeem_script}\n'
                f'address: {p2wsh.address(redeem_script, network)}')

    if args['decode']:
        redeem_script = RedeemScript.from_hex(args['<redeem_script>'])
        content = redeem_script.content()
        lines = [f'quorum: {content.quorum} of {len(content.public_keys)}']
        lines += [f'key {i}: {Utils.to_hex(Wallet.compressed(k))}' for i, k in enumerate(content.public_keys)]
        lines.append(f'asm: {Tokenizer(bytes(redeem_script))}')
        lines.append(f'address: {p2wsh.address(redeem_script, network)}')
        return '\n'.join(lines)

    if args['p2wpk']:
        public_key = Wallet.public_key_from_bytes(Utils.from_hex(args['<pubkey>'][0]))
        return p2wpk.address(public_key, network)

    redeem_script = RedeemScript.from_hex(args['<redeem_script>'])
    return p2wsh.address(redeem_script, network)


def main(argv=None) -> int:
    args = docopt(__doc__, argv=argv)
    try:
        print(run(args))
    except (BaseException, ecdsa.MalformedPointError, ValueError) as e:
        logger.error(f'[cli] {getattr(e, "msg", e)}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
