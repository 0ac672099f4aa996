"""
Mock Responses — Raw envelopes as the service returns them.
Used to check decoding without hitting the live API.
"""

MOCK_TIME_RESPONSE = b'{"error":[],"result":{"unixtime":1616492376,"rfc1123":"Tue, 23 Mar 21 09:39:36 +0000"}}'

MOCK_STATUS_RESPONSE = b'{"error":[],"result":{"status":"online","timestamp":"2021-03-23T09:39:36Z"}}'

MOCK_ERROR_RESPONSE = b'{"error":["EGeneral:Invalid arguments"],"result":null}'

MOCK_AUTH_ERROR_RESPONSE = b'{"error":["EAPI:Invalid key"]}'

MOCK_BALANCE_RESPONSE = b'{"error":[],"result":{"ZUSD":"171288.6158","ZEUR":"504861.8946","XXBT":"1011.1908877900","XETH":"818.5500000000","NEWCOIN":"3.14"}}'

MOCK_PARTIAL_RESPONSE = b'{"error":["EGeneral:Temporary lockout"],"result":{"unixtime":1616492376}}'

MOCK_NOT_JSON_RESPONSE = b"<html><body>502 Bad Gateway</body></html>"

# Signing example published in the service's REST documentation.
DOC_SECRET = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
DOC_NONCE = 1616492376594
DOC_PATH = "/0/private/AddOrder"
DOC_BODY = "nonce=1616492376594&ordertype=limit&pair=XBTUSD&price=37500&type=buy&volume=1.25"
DOC_SIGNATURE = "4/dpxb3iT4tp/ZCVEwSnEsLxx0bqyhLpdfOpc6fn7OR8+UClSV5n9E6aSS8MPtnRfp32bAb0nmbRn6H8ndwLUQ=="
