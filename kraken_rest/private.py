"""Private endpoints. Require credentials; sent as signed POST."""

from .api import ApiBuilder


def endpoint(name: str) -> ApiBuilder:
    """Any private method by its service name, e.g. endpoint("Balance")."""
    return ApiBuilder.private(name)


# ── User Data ────────────────────────────────────────────────────────────────


def balance() -> ApiBuilder:
    """Get account balance."""
    return endpoint("Balance")


def trade_balance() -> ApiBuilder:
    """Get trade balance."""
    return endpoint("TradeBalance")


def open_orders() -> ApiBuilder:
    return endpoint("OpenOrders")


def closed_orders() -> ApiBuilder:
    return endpoint("ClosedOrders")


def query_orders() -> ApiBuilder:
    """Query orders info."""
    return endpoint("QueryOrders")


def trades_history() -> ApiBuilder:
    return endpoint("TradesHistory")


def query_trades() -> ApiBuilder:
    """Query trades info."""
    return endpoint("QueryTrades")


def open_positions() -> ApiBuilder:
    return endpoint("OpenPositions")


def ledgers() -> ApiBuilder:
    """Get ledgers info."""
    return endpoint("Ledgers")


def query_ledgers() -> ApiBuilder:
    return endpoint("QueryLedgers")


def trade_volume() -> ApiBuilder:
    return endpoint("TradeVolume")


def add_export() -> ApiBuilder:
    """Request export report."""
    return endpoint("AddExport")


def export_status() -> ApiBuilder:
    return endpoint("ExportStatus")


def retrieve_export() -> ApiBuilder:
    """Get export report."""
    return endpoint("RetrieveExport")


def remove_export() -> ApiBuilder:
    return endpoint("RemoveExport")


# ── Trading ──────────────────────────────────────────────────────────────


def add_order() -> ApiBuilder:
    """Add standard order."""
    return endpoint("AddOrder")


def cancel_order() -> ApiBuilder:
    """Cancel open order."""
    return endpoint("CancelOrder")


def cancel_all() -> ApiBuilder:
    """Cancel all open orders."""
    return endpoint("CancelAll")


def cancel_all_after() -> ApiBuilder:
    """Cancel all orders when the timeout expires."""
    return endpoint("CancelAllOrdersAfter")


# ── Funding ──────────────────────────────────────────────────────────────


def deposit_methods() -> ApiBuilder:
    return endpoint("DepositMethods")


def deposit_addresses() -> ApiBuilder:
    return endpoint("DepositAddresses")


def deposit_status() -> ApiBuilder:
    """Get status of recent deposits."""
    return endpoint("DepositStatus")


def withdraw_info() -> ApiBuilder:
    return endpoint("WithdrawInfo")


def withdraw() -> ApiBuilder:
    """Withdraw funds."""
    return endpoint("Withdraw")


def withdraw_status() -> ApiBuilder:
    return endpoint("WithdrawStatus")


def withdraw_cancel() -> ApiBuilder:
    """Request withdrawal cancellation."""
    return endpoint("WithdrawCancel")


def wallet_transfer() -> ApiBuilder:
    return endpoint("WalletTransfer")


# ── WebSockets ───────────────────────────────────────────────────────────


def get_websockets_token() -> ApiBuilder:
    """Token to authenticate a WebSockets connection."""
    return endpoint("GetWebSocketsToken")
