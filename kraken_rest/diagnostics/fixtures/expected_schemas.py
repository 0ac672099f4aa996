"""
Expected Schemas — Keys the live endpoints are known to return.
Used by the public suite to spot contract drift.
"""

TIME_RESULT_FIELDS = ["unixtime", "rfc1123"]

STATUS_RESULT_FIELDS = ["status", "timestamp"]
STATUS_VALUES = ["online", "maintenance", "cancel_only", "post_only"]

# Assets: {"XXBT": {"aclass": "currency", "altname": "XBT", "decimals": 10, ...}}
ASSET_INFO_FIELDS = ["aclass", "altname", "decimals", "display_decimals"]

# Ticker: {"XXBTZEUR": {"a": [...], "b": [...], "c": [...], ...}}
TICKER_FIELDS = ["a", "b", "c", "v", "p", "t", "l", "h", "o"]
