"""Hex fixtures for the signing tests."""

# A transaction whose second output pays P2WPKH to the first fixture key.
P2WPK_PREV_TX = (
    "02000000000101beccab33bc72bfc81b63fdec8a4a9a4719e4418bdb7b20e47b02074dc42f2d"
    "800000000017160014f3b1b3819c1290cd5d675c1319dc7d9d98d571bcfeffffff02dceffa02"
    "00000000160014368c6b7c38f0ff0839bf78d77544da96cb685bf28096980000000000160014"
    "284175e336fa10865fb4d1351c9e18e730f5d6f90247304402207c893c85d75e2230dde04f5a"
    "1e2c83c4f0b7d93213372746eb2227b068260d840220705484b6ec70a8fc0d1f80c3a9807960"
    "2595351b7a9bca7caddb9a6adb0a3440012103150514f05f3e3f40c7b404b16f8a09c2c71bad"
    "3ba8da5dd1e411a7069cc080a004b91300"
)

# Spends output 1 of P2WPK_PREV_TX into an OP_RETURN "Hello Exonum!" output.
P2WPK_SIGNED_TX = (
    "0200000000010145f4a039a4bd6cc753ec02a22498b98427c6c288244340fff9d2abb5c63e48"
    "390100000000ffffffff0100000000000000000f6a0d48656c6c6f2045786f6e756d21024830"
    "45022100bdc1be92862281061a14f7153dd57b7b3befa2b98fe85ae5d427d3921fe165ca0220"
    "2f259a63f965f6d7f0503584b463ce4b67c09b5a2e99c27f236f7a986743a94a0121031cf96b"
    "4fef362af7d86ee6c7159fa89485730dac8e3090163dd0c282dbc84f2200000000"
)

# A transaction whose second output pays P2WSH to REDEEM_SCRIPT_12_OF_18.
P2WSH_PREV_TX = (
    "02000000000101f8c16000cc59f9505046303944d42a6c264a322f80b46bb436115b6e306ba9"
    "950000000000feffffff02f07dc81600000000160014f65eb9d72a8475dd8e26f4fa748796e2"
    "11aa8869102700000000000022002001fb25c3db04ca5580da43a7d38dd994650d9aa6d6ee07"
    "5b4578388deed338ed0247304402206b5f211cd7f9b89e80c734b61113c33f437ba153e7ba6b"
    "c275eed857e54fcb260220038562e88b805f0cdfd4873ab3579d52268babe6af9c49086c0034"
    "3187cdf28a012103979dff5cd9045f4b6fa454d2bc5357586a85d4789123df45f83522963d94"
    "e3217fb91300"
)

# Spends output 1 of P2WSH_PREV_TX with the signatures of the first 12 keys.
P2WSH_SIGNED_TX = (
    "02000000000101c4eb8102889b009f55cca8a1a07f3ea388843d6afa4bd77990d2190bb9248f"
    "920100000000ffffffff0100000000000000001d6a1b48656c6c6f2045786f6e756d20776974"
    "68206d756c7469736967210e0047304402200fbebae9eabf9b2c33bb6112a821317e0f676c44"
    "aa7814d145bb6045bfb77bce022044df3307ce0a1a70d1d0b62432dba42d7e4aeaabe0290f54"
    "74509658a1196e33014730440220494baff1971f5a9b3ec63015466551a0acc185de8fc44228"
    "e3c4726550749abe02203d72b5032b8b88d3294b547b7bfe4e82f75d4e8268e64f5751b65ba0"
    "cc66efbb01473044022058eee8c7fbb81a471e4c71f7722e933297dfeaccc9fa86cac2a3aa7f"
    "0a78c17b022050fd3566953cb433471284c061285f51a118c51a46d62d92fe7c7d89434dc8f3"
    "0147304402203c1e6392beda5bd01cf3ce8e4b78f6e21687113137a791739f53ba5459171d53"
    "02200362ee0d9981797b89133c5ade65f9bcb46af169afea15d303d1b55eabbdedfb01483045"
    "022100f4be0af94fb9fa74893439378e836b3e4b81aeb0edd47769d0177c1db6f37fdb022026"
    "52bcea0a3e0b2df754354c45d4fe349c5fd44e47e98daec9202d8dd2bb894901473044022042"
    "38210b1719108ea514ed59d3a56136ddb1cd3c99227156db45aa583881b2c3022039cfc5801d"
    "9b785ea544651dcf22e39c2ed6f3f4b3f5bda4858236404934285a0147304402202741c8bbff"
    "b09432276d80fcfafb6e3c294a635fb09f27002084a1086fab19e202203bdaec2725159c9d9a"
    "7126525345ae51838d0052acdba6b070fba096aa46680e01473044022032894b2a78f9f0cd95"
    "543f9d56a233a469ce2448f994bd966ca0ff38b18eac880220101689725199b25946f19eed14"
    "37d48f6f6714c062c22ce94a6e222e4fe01b6c01483045022100acee27e70ac1dbd4fb07e25b"
    "b3095cba858c2cee8169ac55d4ee8da10a00742b02200b5a6ecdf5d375d561a53862e792136c"
    "10ed0287ffc9a8de52f45ab1fc3dbf770147304402204f3778dae6b8166bd667a59c8d30b9eb"
    "3b8572a2aa3c119787394ce4bbb58ae5022064b4df41b2de281082fde6b2d1a4e25212c10f60"
    "11bbb048d1c54ddb91e33dfa01473044022060873642a76f8dfc36afcb5bd15a07da341ab040"
    "7f880e6a99d9ece22bca825902207cfb5ce2fea244355d0c9e589e91f626b1ba90ebfe5eff33"
    "a2e8e5706f5f36970147304402201ffe9090290e0a1a3cad7bc276a35da219528dd1b82c25b1"
    "a9ed190453925a59022004caee4a37ffe322fd5e45f25d42c65565be70a326edb38ba6d6f1a6"
    "0332154e01fd68025c21031cf96b4fef362af7d86ee6c7159fa89485730dac8e3090163dd0c2"
    "82dbc84f2221028839757bba9bdf46ae553c124479e5c3ded609495f3e93e88ab23c0f559e8b"
    "e521035c70ffb21d1b454ec650e511e76f6bd3fe76f49c471522ee187abac8d0131a18210234"
    "acd7dee22bc23688beed0c7e42c0930cfe024204b7298b0b59d0e76a46476521033897e8dd88"
    "ee04cb42b69838c3167471880da23944c10eb9f67de2b5ca32a9d121027a715cf0aeec55482c"
    "1d42bfeb75c8f54348ec8b0ca0f9b535ed50a739b8ad632103a2be0380e248ec36401e99680e"
    "0fb4f8c03a0a5e00d5dda107aee6cba77b639521038bdb47da82981776e8b0e5d4175f279303"
    "39a32e77ee7052ec51a1f2f0a46e88210312c4fb516caeb5eaec8ffdeecd4a507b69d6808651"
    "ae02a4a61165cc56bfe55121039e021ca4d7969e5db181e0905b9baab2afe395e84587b588a6"
    "b039207c911355210259c9f752846c7bd514a042d53ea305f2d4ca7873cb21937dc6b5e82afb"
    "b8fb922102c52c3dc6e080ea4e74ba2e6797548bd79a692a01baeba1c757a18fd0ef519fb421"
    "02f5010ab66dd7a8dc06caefeceb9bb7e6e42c5d4afdab527a2f02d87b758920612103efbcec"
    "8bcc6ea4e58b44214b14eae2677399c28df8bb81fcd120cb4c88ce3bd92103e88aa50f0d7f43"
    "cb3171a69675385f130c6abafacadde87fc84d5a194da5ad9c21025ed88603b59882c3ec6ef4"
    "3c0b33ac9db315ecca8e7073e60d9b56145fc0efa02103643277862c4a8ab27913e3d2bcea10"
    "9b6637c7454a03410aac8ccad445e81a502103380785c3e1c105e366ff445227cdde68e6a646"
    "1d6793a1437db847ecd04129dc0112ae00000000"
)

REDEEM_SCRIPT_3_OF_4 = (
    "5321027db7837e51888e94c094703030d162c682c8dba312210f44ff440fbd5e5c24732102bd"
    "d272891c9e4dfc3962b1fdffd5a59732019816f9db4833634dbdaf01a401a52103280883dc31"
    "ccaee34218819aaa245480c35a33acd91283586ff6d1284ed681e52103e2bc790a6e32bf5a76"
    "6919ff55b1f9e9914e13aed84f502c0e4171976e19deb054ae"
)

REDEEM_SCRIPT_12_OF_18 = (
    "5c21031cf96b4fef362af7d86ee6c7159fa89485730dac8e3090163dd0c282dbc84f22210288"
    "39757bba9bdf46ae553c124479e5c3ded609495f3e93e88ab23c0f559e8be521035c70ffb21d"
    "1b454ec650e511e76f6bd3fe76f49c471522ee187abac8d0131a18210234acd7dee22bc23688"
    "beed0c7e42c0930cfe024204b7298b0b59d0e76a46476521033897e8dd88ee04cb42b69838c3"
    "167471880da23944c10eb9f67de2b5ca32a9d121027a715cf0aeec55482c1d42bfeb75c8f543"
    "48ec8b0ca0f9b535ed50a739b8ad632103a2be0380e248ec36401e99680e0fb4f8c03a0a5e00"
    "d5dda107aee6cba77b639521038bdb47da82981776e8b0e5d4175f27930339a32e77ee7052ec"
    "51a1f2f0a46e88210312c4fb516caeb5eaec8ffdeecd4a507b69d6808651ae02a4a61165cc56"
    "bfe55121039e021ca4d7969e5db181e0905b9baab2afe395e84587b588a6b039207c91135521"
    "0259c9f752846c7bd514a042d53ea305f2d4ca7873cb21937dc6b5e82afbb8fb922102c52c3d"
    "c6e080ea4e74ba2e6797548bd79a692a01baeba1c757a18fd0ef519fb42102f5010ab66dd7a8"
    "dc06caefeceb9bb7e6e42c5d4afdab527a2f02d87b758920612103efbcec8bcc6ea4e58b4421"
    "4b14eae2677399c28df8bb81fcd120cb4c88ce3bd92103e88aa50f0d7f43cb3171a69675385f"
    "130c6abafacadde87fc84d5a194da5ad9c21025ed88603b59882c3ec6ef43c0b33ac9db315ec"
    "ca8e7073e60d9b56145fc0efa02103643277862c4a8ab27913e3d2bcea109b6637c7454a0341"
    "0aac8ccad445e81a502103380785c3e1c105e366ff445227cdde68e6a6461d6793a1437db847"
    "ecd04129dc0112ae"
)

# The public key of P2WPK_PREV_TX, also the first key of REDEEM_SCRIPT_12_OF_18.
FIXTURE_PUBLIC_KEY = "031cf96b4fef362af7d86ee6c7159fa89485730dac8e3090163dd0c282dbc84f22"

# OP_0 <32 bytes>: a witness output script, not a redeem script.
P2WSH_OUTPUT_SCRIPT = "0020e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
