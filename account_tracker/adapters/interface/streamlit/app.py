"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import streamlit as st
import altair as alt

from account_tracker.application.use_cases.chart_window import (
    CHART_RANGE_LABELS,
    DEFAULT_CHART_RANGE,
    get_chart_window,
)
from account_tracker.domain.constants import FREQUENCIES, FREQUENCY_MONTHLY
from account_tracker.domain.errors import ProjectionError
from account_tracker.domain.models import (
    AccountConfig,
    CalendarDay,
    DailyBalancePoint,
    ProjectedOccurrence,
    Transaction,
)
from account_tracker.domain.services.aggregation import chart_rows, weeks
from account_tracker.domain.services.date_calendar import today_in_timezone
from account_tracker.domain.services.normalization import coerce_amount
from account_tracker.infrastructure.container import (
    build_balance_series_use_case,
    build_expand_recurring_use_case,
    build_manage_transactions_use_case,
    build_month_grid_use_case,
    build_transaction_store,
    build_update_account_config_use_case,
)
from account_tracker.infrastructure.logging.logger import get_usage_logger

_WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
_SPREADSHEET_DAYS = 90


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy and pandas are usable by Altair."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (ndarray missing)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (Timestamp missing)."
    return True, None


@st.cache_resource(show_spinner=False)
def _get_store():
    """Return the initialized transaction store for this server."""
    store = build_transaction_store()
    store.initialize()
    return store


def _fetch_config() -> AccountConfig:
    """Fetch the account configuration."""
    return build_update_account_config_use_case(_get_store()).current()


def _fetch_transactions() -> Sequence[Transaction]:
    """Fetch base transactions, newest first."""
    use_case = build_manage_transactions_use_case(_get_store())
    return use_case.list_transactions()


def _fetch_balance_series(
    start_date: date,
    end_date: date,
) -> Sequence[DailyBalancePoint]:
    """Fetch the daily balance series for a window."""
    use_case = build_balance_series_use_case(_get_store())
    return use_case.execute(start_date, end_date)


@st.cache_data(show_spinner=False)
def _load_balance_series(
    start_date: date,
    end_date: date,
    revision: int = 0,
) -> Sequence[DailyBalancePoint]:
    """Cached wrapper around _fetch_balance_series."""
    _ = revision
    return _fetch_balance_series(start_date, end_date)


def _fetch_month_grid(year: int, month: int) -> Sequence[CalendarDay]:
    """Fetch the calendar cells of a month."""
    return build_month_grid_use_case(_get_store()).execute(year, month)


@st.cache_data(show_spinner=False)
def _load_month_grid(
    year: int,
    month: int,
    revision: int = 0,
) -> Sequence[CalendarDay]:
    """Cached wrapper around _fetch_month_grid."""
    _ = revision
    return _fetch_month_grid(year, month)


def _fetch_occurrences(
    start_date: date,
    end_date: date,
) -> Sequence[ProjectedOccurrence]:
    """Fetch projected occurrences for a window."""
    use_case = build_expand_recurring_use_case(_get_store())
    return use_case.execute(start_date, end_date)


def _revision() -> int:
    """Return the data revision used to invalidate cached projections."""
    return st.session_state.get("revision", 0)


def _bump_revision() -> None:
    st.session_state["revision"] = _revision() + 1


def _format_currency(value: Decimal) -> str:
    """Format an amount as US dollars."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_pattern(transaction: Transaction) -> str:
    """Describe the recurrence of a transaction."""
    pattern = transaction.recurring_pattern
    if not transaction.is_recurring or pattern is None:
        return "One-off"
    unit = {
        "daily": "day",
        "weekly": "week",
        "monthly": "month",
        "yearly": "year",
    }[pattern.frequency]
    label = f"Every {unit}" if pattern.interval == 1 else (
        f"Every {pattern.interval} {unit}s"
    )
    if pattern.end_date:
        label += f" until {pattern.end_date.isoformat()}"
    return label


def _transaction_rows(
    transactions: Sequence[Transaction],
) -> list[dict[str, str]]:
    """Return table rows for base transactions."""
    return [
        {
            "Date": item.date.isoformat(),
            "Name": item.name,
            "Amount": _format_currency(item.amount),
            "Recurrence": _format_pattern(item),
            "Note": item.note or "",
        }
        for item in transactions
    ]


def _occurrence_rows(
    occurrences: Sequence[ProjectedOccurrence],
) -> list[dict[str, str]]:
    """Return table rows for projected occurrences."""
    return [
        {
            "Date": item.date.isoformat(),
            "Name": item.name,
            "Amount": _format_currency(item.amount),
            "Note": item.note or "",
        }
        for item in occurrences
    ]


def _prepare_chart_data(
    points: Sequence[DailyBalancePoint],
) -> list[dict[str, object]]:
    """Return Altair-ready rows with display labels."""
    rows = chart_rows(points)
    for row, point in zip(rows, points):
        row["balance_label"] = _format_currency(point.balance)
    return rows


def _calendar_rows(cells: Sequence[CalendarDay]) -> list[dict[str, str]]:
    """Return one table row per week with day, balance and names."""
    rows = []
    for week in weeks(cells):
        row = {}
        for name, cell in zip(_WEEKDAY_NAMES, week):
            marker = "" if cell.is_current_month else "·"
            lines = [
                f"{marker}{cell.date.day}",
                _format_currency(cell.balance),
            ]
            lines.extend(item.name for item in cell.transactions)
            row[name] = "\n".join(lines)
        rows.append(row)
    return rows


def _form_defaults(
    transaction: Transaction | None,
    today: date,
) -> dict[str, object]:
    """Return the initial widget values of the transaction form."""
    if transaction is None:
        return {
            "date": today,
            "name": "",
            "amount": 0.0,
            "note": "",
            "is_recurring": False,
            "frequency": FREQUENCY_MONTHLY,
            "interval": 1,
            "has_end": False,
            "end_date": today,
        }
    pattern = transaction.recurring_pattern
    end_date = pattern.end_date if pattern else None
    return {
        "date": transaction.date,
        "name": transaction.name,
        "amount": float(transaction.amount),
        "note": transaction.note or "",
        "is_recurring": transaction.is_recurring,
        "frequency": pattern.frequency if pattern else FREQUENCY_MONTHLY,
        "interval": pattern.interval if pattern else 1,
        "has_end": end_date is not None,
        "end_date": end_date or transaction.date,
    }


def _transaction_payload(values: dict[str, object]) -> dict[str, object]:
    """Build the use-case payload from submitted form values.

    Raises:
        InvalidTransaction: If the amount is not a finite number.
    """
    return {
        "date": values["date"],
        "name": values["name"],
        "amount": coerce_amount(values["amount"]),
        "note": values["note"],
        "isRecurring": values["is_recurring"],
        "recurringPattern": {
            "frequency": values["frequency"],
            "interval": int(values["interval"]),
            "endDate": values["end_date"] if values["has_end"] else None,
        },
    }


def _transaction_fields(key: str, defaults: dict[str, object]) -> dict:
    """Render the transaction inputs inside the current form."""
    return {
        "date": st.date_input(
            "Date",
            defaults["date"],
            key=f"{key}_date",
        ),
        "name": st.text_input("Name", defaults["name"], key=f"{key}_name"),
        "amount": st.number_input(
            "Amount",
            value=defaults["amount"],
            step=1.0,
            format="%.2f",
            key=f"{key}_amount",
        ),
        "note": st.text_input("Note", defaults["note"], key=f"{key}_note"),
        "is_recurring": st.checkbox(
            "Recurring",
            defaults["is_recurring"],
            key=f"{key}_recurring",
        ),
        "frequency": st.selectbox(
            "Frequency",
            list(FREQUENCIES),
            index=list(FREQUENCIES).index(defaults["frequency"]),
            key=f"{key}_frequency",
        ),
        "interval": st.number_input(
            "Interval",
            min_value=1,
            value=defaults["interval"],
            key=f"{key}_interval",
        ),
        "has_end": st.checkbox(
            "Has end date",
            defaults["has_end"],
            key=f"{key}_has_end",
        ),
        "end_date": st.date_input(
            "End date",
            defaults["end_date"],
            key=f"{key}_end_date",
        ),
    }


def _add_transaction(values: dict[str, object]) -> Transaction:
    """Create a transaction from form values and refresh projections."""
    use_case = build_manage_transactions_use_case(_get_store())
    created = use_case.add(_transaction_payload(values))
    get_usage_logger().info(f"Transaction added: {created.id}")
    _bump_revision()
    return created


def _update_transaction(
    transaction_id: str,
    values: dict[str, object],
) -> Transaction | None:
    """Apply edited form values to a stored transaction."""
    use_case = build_manage_transactions_use_case(_get_store())
    updated = use_case.update(transaction_id, _transaction_payload(values))
    if updated is not None:
        get_usage_logger().info(f"Transaction updated: {transaction_id}")
        _bump_revision()
    return updated


def _transaction_labels(
    transactions: Sequence[Transaction],
) -> dict[str, Transaction]:
    return {
        f"{item.date.isoformat()} · {item.name} · "
        f"{_format_currency(item.amount)}": item
        for item in transactions
    }


def _render_spreadsheet(today: date) -> None:
    """Render base transactions, the edit forms and upcoming occurrences."""
    st.subheader("Transactions")
    transactions = _fetch_transactions()
    st.dataframe(
        _transaction_rows(transactions),
        width="stretch",
        hide_index=True,
    )
    _render_add_form(today)
    if transactions:
        _render_edit_form(transactions, today)
        _render_delete_form(transactions)

    st.subheader(f"Upcoming ({_SPREADSHEET_DAYS} days)")
    end = today + timedelta(days=_SPREADSHEET_DAYS)
    occurrences = _fetch_occurrences(today, end)
    st.caption(f"{len(occurrences)} projected occurrences")
    st.dataframe(
        _occurrence_rows(occurrences),
        width="stretch",
        hide_index=True,
    )


def _render_add_form(today: date) -> None:
    """Render the form creating a transaction."""
    with st.expander("Add transaction"):
        with st.form("add_transaction", clear_on_submit=True):
            values = _transaction_fields("add", _form_defaults(None, today))
            submitted = st.form_submit_button("Add")
        if not submitted:
            return
        try:
            created = _add_transaction(values)
        except ProjectionError as exc:
            st.error(str(exc))
            return
        st.success(f"Added {created.name}")


def _render_edit_form(
    transactions: Sequence[Transaction],
    today: date,
) -> None:
    """Render the form editing an existing transaction."""
    with st.expander("Edit transaction"):
        labels = _transaction_labels(transactions)
        choice = st.selectbox("Transaction", list(labels), key="edit_choice")
        transaction = labels[choice]
        key = f"edit_{transaction.id}"
        with st.form(key):
            values = _transaction_fields(
                key,
                _form_defaults(transaction, today),
            )
            submitted = st.form_submit_button("Save changes")
        if not submitted:
            return
        try:
            updated = _update_transaction(transaction.id, values)
        except ProjectionError as exc:
            st.error(str(exc))
            return
        if updated is None:
            st.warning("Transaction no longer exists")
            return
        st.success(f"Updated {updated.name}")


def _render_delete_form(transactions: Sequence[Transaction]) -> None:
    """Render the selector deleting a transaction."""
    with st.expander("Delete transaction"):
        labels = _transaction_labels(transactions)
        choice = st.selectbox(
            "Transaction",
            list(labels),
            key="delete_choice",
        )
        if st.button("Delete"):
            transaction_id = labels[choice].id
            use_case = build_manage_transactions_use_case(_get_store())
            use_case.delete(transaction_id)
            get_usage_logger().info(f"Transaction deleted: {transaction_id}")
            _bump_revision()
            st.success("Deleted")


def _render_chart(today: date) -> None:
    """Render the balance line chart for the selected range."""
    st.subheader("Balance")
    range_key = st.radio(
        "Range",
        list(CHART_RANGE_LABELS),
        index=list(CHART_RANGE_LABELS).index(DEFAULT_CHART_RANGE),
        format_func=CHART_RANGE_LABELS.get,
        horizontal=True,
    )
    start, end = get_chart_window(range_key, today)
    points = _load_balance_series(start, end, revision=_revision())
    if not points:
        st.info("No balance data for this range.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_chart_data(points)
    line = alt.Chart(alt.Data(values=data)).mark_line(
        interpolate="step-after",
        strokeWidth=2,
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("balance:Q", title="Balance"),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("balance_label:N", title="Balance"),
            alt.Tooltip("transaction_count:Q", title="Transactions"),
        ],
    )
    today_rule = alt.Chart(
        alt.Data(values=[{"date": today.isoformat()}])
    ).mark_rule(strokeDash=[4, 4], color="#e76f51").encode(x="date:T")
    st.altair_chart(alt.layer(line, today_rule), width="stretch")
    current, lowest, highest = st.columns(3)
    balances = [point.balance for point in points]
    current.metric("End balance", _format_currency(balances[-1]))
    lowest.metric("Lowest", _format_currency(min(balances)))
    highest.metric("Highest", _format_currency(max(balances)))


def _render_calendar(today: date) -> None:
    """Render the month grid with navigation inputs."""
    st.subheader("Calendar")
    year_col, month_col = st.columns(2)
    year = int(year_col.number_input("Year", value=today.year, step=1))
    month = int(
        month_col.number_input(
            "Month",
            min_value=1,
            max_value=12,
            value=today.month,
            step=1,
        )
    )
    cells = _load_month_grid(year, month, revision=_revision())
    st.caption("Days marked · belong to the adjacent months.")
    st.dataframe(_calendar_rows(cells), width="stretch", hide_index=True)


def _render_config_sidebar(config: AccountConfig) -> None:
    """Render the configuration form in the sidebar."""
    st.sidebar.subheader("Configuration")
    with st.sidebar.form("config"):
        balance = st.number_input(
            "Starting balance",
            value=float(config.starting_balance),
            step=100.0,
            format="%.2f",
        )
        starting_date = st.date_input("Starting date", config.starting_date)
        timezone = st.text_input("Timezone", config.timezone)
        submitted = st.form_submit_button("Save")
    if not submitted:
        return
    try:
        build_update_account_config_use_case(_get_store()).execute(
            {
                "startingBalance": str(balance),
                "startingDate": starting_date,
                "timezone": timezone,
            }
        )
    except ProjectionError as exc:
        st.sidebar.error(str(exc))
        return
    get_usage_logger().info("Account configuration saved")
    _bump_revision()
    st.sidebar.success("Configuration saved")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Account Tracker", layout="wide")
    st.title("Account Tracker")

    try:
        config = _fetch_config()
    except ProjectionError as exc:
        st.error(f"Invalid account configuration: {exc}")
        return
    today = today_in_timezone(config.timezone)
    _render_config_sidebar(config)
    page = st.sidebar.selectbox("View", ["Spreadsheet", "Chart", "Calendar"])
    st.caption(
        f"Starting balance {_format_currency(config.starting_balance)} on "
        f"{config.starting_date.isoformat()} · today {today.isoformat()} "
        f"({config.timezone})"
    )

    try:
        if page == "Spreadsheet":
            _render_spreadsheet(today)
        elif page == "Chart":
            _render_chart(today)
        else:
            _render_calendar(today)
    except ProjectionError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
