"""Streamlit entry point for the Expense Tracker dashboard."""

from __future__ import annotations

import streamlit as st
from expense_tracker import metrics, utils, viz
from expense_tracker.api import ApiClient
from expense_tracker.chat import ChatSession
from expense_tracker.config import Settings, load_settings
from expense_tracker.dashboard import Dashboard, LoadStatus
from expense_tracker.samples import SAMPLE_TRANSACTIONS
from expense_tracker.session import SessionStore
from expense_tracker.view_state import HighlightState, OverlaySelection, Paginator, highlight_choices

PLOT_CONFIG = {"displayModeBar": False}

LIGHT_THEME = {
    "background": "#f5f7fb",
    "card": "#ffffff",
    "border": "rgba(226, 232, 240, 0.9)",
    "text": "#0f172a",
    "muted": "#64748b",
}

DARK_THEME = {
    "background": "#0b1120",
    "card": "#111827",
    "border": "rgba(51, 65, 85, 0.9)",
    "text": "#f1f5f9",
    "muted": "#94a3b8",
}


def _read_secrets() -> dict[str, object]:
    try:
        return dict(st.secrets)
    except Exception:  # no secrets.toml configured
        return {}


@st.cache_resource(show_spinner=False)
def _session_store(path: str) -> SessionStore:
    return SessionStore(path)


@st.cache_resource(show_spinner=False)
def _api_client(base_url: str) -> ApiClient:
    return ApiClient(base_url)


def _inject_styles(dark: bool) -> None:
    theme = DARK_THEME if dark else LIGHT_THEME
    st.markdown(
        f"""
        <style>
        :root {{
            --primary-500: #dc2626;
            --card-bg: {theme["card"]};
            --card-border: {theme["border"]};
            --text: {theme["text"]};
            --muted: {theme["muted"]};
            --success-500: #16a34a;
            --danger-500: #dc2626;
        }}

        [data-testid="stAppViewContainer"] {{
            background: {theme["background"]};
            color: var(--text);
        }}

        [data-testid="stHeader"] {{
            background: transparent;
        }}

        h1, h2, h3 {{
            color: var(--text);
        }}

        div[data-testid="stMetric"] {{
            background: var(--card-bg);
            border-radius: 18px;
            border: 1px solid var(--card-border);
            padding: 1.15rem 1.25rem;
        }}

        div[data-testid="stMetric"] label {{
            font-weight: 600;
            letter-spacing: 0.05em;
            text-transform: uppercase;
            font-size: 0.78rem;
            color: var(--muted);
        }}

        .stTabs [role="tab"][aria-selected="true"] {{
            color: var(--primary-500);
        }}

        .budget-row {{
            margin-bottom: 1rem;
        }}

        .budget-row__header, .budget-row__footer {{
            display: flex;
            justify-content: space-between;
            font-size: 0.9rem;
            color: var(--muted);
        }}

        .budget-row__footer {{
            font-size: 0.75rem;
            margin-top: 0.25rem;
        }}

        .budget-row__track {{
            position: relative;
            height: 8px;
            border-radius: 999px;
            background: var(--card-border);
            margin-top: 0.4rem;
        }}

        .budget-row__bar {{
            height: 8px;
            border-radius: 999px;
        }}

        .budget-row__marker {{
            position: absolute;
            top: 0;
            width: 2px;
            height: 8px;
            background: var(--text);
            opacity: 0.6;
        }}

        .budget-row__status--over {{
            color: var(--danger-500);
        }}

        .budget-row__status--ok {{
            color: var(--success-500);
        }}

        .txn-row {{
            display: flex;
            align-items: center;
            justify-content: space-between;
            padding: 0.6rem 0;
            border-bottom: 1px solid var(--card-border);
        }}

        .txn-row__icon {{
            width: 2.2rem;
            height: 2.2rem;
            border-radius: 999px;
            display: inline-flex;
            align-items: center;
            justify-content: center;
            margin-right: 0.75rem;
        }}

        .txn-row__meta {{
            font-size: 0.8rem;
            color: var(--muted);
        }}

        .txn-row__amount--payment {{
            color: var(--success-500);
            font-weight: 600;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _ensure_state(settings: Settings) -> None:
    state = st.session_state
    if "dashboard" not in state:
        client = _api_client(settings.api_url)
        state["dashboard"] = Dashboard(client)
        state["chat"] = ChatSession(client)
        state["paginator"] = Paginator(page_size=settings.page_size)
        state["overlay"] = OverlaySelection()
        state["highlight"] = HighlightState()
        state["uploader_key"] = 0


def render_login(store: SessionStore) -> None:
    _, center, _ = st.columns([1, 1.2, 1])
    with center:
        st.title("💳 Expense Tracker")
        st.caption("Sign in to view your spending dashboard")
        with st.form("login"):
            username = st.text_input("Username", placeholder="Enter your username")
            password = st.text_input("Password", type="password", placeholder="Enter your password")
            submitted = st.form_submit_button("Sign In", use_container_width=True)
        st.caption("Demo: Use any username and password to sign in")

    if submitted:
        if store.login(username, password):
            st.rerun()
        else:
            st.error("Enter both a username and a password.")


def render_header(store: SessionStore) -> None:
    title_col, toggle_col, logout_col = st.columns([4, 1, 1])
    with title_col:
        st.title("Expense Tracker")
        st.caption("Track and analyze your spending across categories")
    with toggle_col:
        st.toggle("🌙 Dark mode", value=store.dark_mode, on_change=store.toggle_dark_mode)
    with logout_col:
        if st.button("Logout", use_container_width=True):
            store.logout()
            st.rerun()


def render_error_banner(dashboard: Dashboard) -> None:
    if dashboard.status != LoadStatus.FAILED:
        return
    with st.container(border=True):
        st.error(f"Unable to sync with the backend: {dashboard.error}")
        st.button("Retry", on_click=dashboard.mark_loading)


def render_overview(dashboard: Dashboard, currency: str) -> None:
    card = metrics.overview(dashboard.summary())
    cols = st.columns(3)
    cols[0].metric(
        "Total this month",
        utils.format_currency(card["total_spending"], currency),
        delta=f"{utils.format_signed_currency(card['difference_amount'], currency)} "
        f"({card['difference_percent']:.1f}%)",
        delta_color="inverse",
    )
    cols[0].caption(f"Last month: {utils.format_currency(card['last_month_total'], currency)}")
    cols[1].metric(
        "Daily average",
        utils.format_currency(card["daily_average"], currency),
        delta=f"{card['daily_average_change']:+.1f}% from last month",
        delta_color="inverse",
    )
    cols[2].metric(
        "Top category",
        card["top_category"],
        delta=f"{utils.format_currency(card['top_category_amount'], currency)} "
        f"({card['top_category_percent']:.1f}%)",
        delta_color="off",
    )


def render_needs_wants(dashboard: Dashboard, currency: str, dark: bool) -> None:
    points = dashboard.needs_wants()
    totals = metrics.needs_wants_totals(points)
    st.markdown("### Needs vs Wants")
    st.caption(
        f"Needs {utils.format_currency(totals['needs'], currency)} · "
        f"Wants {utils.format_currency(totals['wants'], currency)}"
    )
    st.plotly_chart(viz.plot_needs_vs_wants(points, currency, dark), use_container_width=True, config=PLOT_CONFIG)


def render_trend(dashboard: Dashboard, overlay: OverlaySelection, currency: str, dark: bool) -> None:
    title_col, select_col = st.columns([3, 1])
    with title_col:
        st.markdown("### Monthly Spending Trend")
        st.caption(dashboard.caption("Live data from the backend", "Last 7 months"))
    with select_col:
        choice = st.selectbox(
            "Overlay",
            overlay.options,
            index=overlay.options.index(overlay.selected),
            format_func=overlay.label,
        )
        overlay.select(choice)
    fig = viz.plot_spending_trend(dashboard.trend(), overlay, currency, dark)
    st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)


def render_category_pie(
    dashboard: Dashboard,
    highlight: HighlightState,
    currency: str,
    dark: bool,
) -> None:
    st.markdown("### Spending by Category")
    st.caption(dashboard.caption("Live data from the backend", "Sample breakdown"))
    slices = metrics.pie_slices(dashboard.category_breakdown())
    if st.session_state.get("pie_highlight") not in range(len(slices)):
        st.session_state["pie_highlight"] = None
    choice = st.selectbox(
        "Highlight",
        highlight_choices(len(slices)),
        format_func=lambda index: "None" if index is None else slices[index]["name"],
        key="pie_highlight",
    )
    highlight.activate(choice)
    fig = viz.plot_category_donut(slices, highlight, currency, dark)
    st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)


def render_income_vs_expenses(dashboard: Dashboard, currency: str, dark: bool) -> None:
    points = dashboard.income_vs_expenses()
    stats = metrics.income_expense_stats(points)
    st.markdown("### Income vs Expenses")
    st.caption(
        f"Average net {utils.format_signed_currency(stats['average_net'], currency)} · "
        f"Savings rate {stats['savings_rate']:.1f}%"
    )
    st.plotly_chart(viz.plot_income_vs_expenses(points, currency, dark), use_container_width=True, config=PLOT_CONFIG)


def render_chat(chat: ChatSession) -> None:
    st.markdown("### Financial Assistant")
    with st.container(border=True, height=320):
        if not chat.messages:
            st.caption("Ask me anything about your spending, budgets or savings.")
        for message in chat.messages:
            with st.chat_message(message["role"]):
                st.markdown(message["content"])

    with st.form("chat", clear_on_submit=True):
        prompt_col, send_col = st.columns([5, 1])
        prompt = prompt_col.text_input(
            "Message",
            placeholder="Ask about your finances...",
            label_visibility="collapsed",
        )
        sent = send_col.form_submit_button("Send", use_container_width=True, disabled=chat.is_loading)
    if sent and prompt.strip():
        with st.spinner("Thinking…"):
            chat.send(prompt)
        st.rerun()


def render_transactions(dashboard: Dashboard, paginator: Paginator, currency: str) -> None:
    paginator.bind(dashboard.transactions())
    live = dashboard.has_live_transactions()
    st.caption(paginator.range_label() if live else "Sample transactions")

    if dashboard.is_loading and live:
        st.caption("Loading transactions…")
        return

    rows = metrics.transaction_rows(paginator.current_items())
    st.markdown("".join(viz.transaction_row_html(row, currency) for row in rows), unsafe_allow_html=True)

    if paginator.needs_controls:
        info_col, prev_col, next_col = st.columns([4, 1, 1])
        info_col.caption(f"Page {paginator.page} of {paginator.total_pages}")
        prev_col.button(
            "Previous",
            on_click=paginator.previous_page,
            disabled=not paginator.has_previous,
            use_container_width=True,
        )
        next_col.button(
            "Next",
            on_click=paginator.next_page,
            disabled=not paginator.has_next,
            use_container_width=True,
        )


def render_budget(dashboard: Dashboard, currency: str) -> None:
    st.caption(dashboard.caption("Live data from the backend", "Sample guide based on mock data"))
    rows = metrics.budget_rows(dashboard.category_breakdown())
    if not rows:
        st.caption("No category breakdown returned by the backend.")
    else:
        st.markdown("".join(viz.budget_row_html(row, currency) for row in rows), unsafe_allow_html=True)
    st.divider()
    total_col, value_col = st.columns([3, 1])
    total_col.markdown("**Total Expenses**")
    value_col.markdown(f"### {utils.format_currency(dashboard.total_expenses(), currency)}")


def render_upload(dashboard: Dashboard) -> None:
    if dashboard.is_using_sample_data:
        st.warning("* You are currently viewing sample data")

    st.markdown("### Import Your Banking Data")
    st.caption("Upload a CSV file from your bank to import actual transaction data")
    uploaded = st.file_uploader(
        "Upload CSV File",
        key=f"uploader_{st.session_state['uploader_key']}",
        disabled=dashboard.is_uploading,
    )
    if uploaded is not None:
        with st.spinner("Uploading…"):
            outcome = dashboard.upload(uploaded.name, uploaded.getvalue(), uploaded.type)
        st.session_state["uploader_key"] += 1
        st.session_state["upload_notice"] = outcome
        st.rerun()

    notice = st.session_state.pop("upload_notice", None)
    if notice is not None:
        st.toast(notice.message, icon="✅" if notice.ok else "⚠️")

    sample_csv = utils.ensure_dataframe(SAMPLE_TRANSACTIONS).to_csv(index=False)
    st.download_button(
        "Download sample CSV",
        data=sample_csv,
        file_name="sample_transactions.csv",
        mime="text/csv",
    )
    st.caption("Supported format: CSV files exported from most major banks.")


def render_dashboard(store: SessionStore, settings: Settings) -> None:
    _ensure_state(settings)
    dashboard: Dashboard = st.session_state["dashboard"]
    currency = settings.currency
    dark = store.dark_mode

    if dashboard.status == LoadStatus.IDLE:
        dashboard.mark_loading()

    render_header(store)
    render_error_banner(dashboard)
    render_overview(dashboard, currency)

    if dashboard.has_live_trend() or dashboard.is_using_sample_data:
        render_needs_wants(dashboard, currency, dark)

    st.divider()
    render_trend(dashboard, st.session_state["overlay"], currency, dark)
    st.divider()

    pie_col, flow_col = st.columns(2, gap="large")
    with pie_col:
        render_category_pie(dashboard, st.session_state["highlight"], currency, dark)
    with flow_col:
        render_income_vs_expenses(dashboard, currency, dark)

    st.markdown("### Daily Spend")
    st.plotly_chart(
        viz.plot_daily_spend(dashboard.daily_snapshot(), currency, dark),
        use_container_width=True,
        config=PLOT_CONFIG,
    )

    render_chat(st.session_state["chat"])

    transactions_tab, categories_tab = st.tabs(["Recent Transactions", "Category Breakdown"])
    with transactions_tab:
        render_transactions(dashboard, st.session_state["paginator"], currency)
    with categories_tab:
        render_budget(dashboard, currency)

    st.divider()
    render_upload(dashboard)

    # Everything above rendered in its loading state; fetch last.
    if dashboard.is_loading:
        dashboard.load()
        st.rerun()


def main() -> None:
    """Render the Expense Tracker Streamlit application."""

    st.set_page_config(
        page_title="Expense Tracker",
        page_icon="💳",
        layout="wide",
    )

    settings = load_settings(secrets=_read_secrets())
    utils.configure_logging(settings.log_level)

    store = _session_store(str(settings.session_file))
    _inject_styles(store.dark_mode)

    if not store.is_logged_in:
        render_login(store)
        return

    render_dashboard(store, settings)


if __name__ == "__main__":
    main()
