"""Visualization utilities for the Expense Tracker dashboard."""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping, Sequence

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from . import metrics, samples, utils
from .view_state import HighlightState, OverlaySelection

INCOME_COLOR = "#10b981"
EXPENSES_COLOR = "#dc2626"
NEEDS_COLOR = "#2563eb"
WANTS_COLOR = "#f59e0b"


def _template(dark: bool) -> str:
    return "plotly_dark" if dark else "plotly_white"


def _with_alpha(color: str, alpha: float) -> str:
    value = color.lstrip("#")
    if len(value) != 6:
        return color
    red, green, blue = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"


def _empty_figure(message: str, dark: bool = False) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        showarrow=False,
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        font=dict(size=14, color="#6c757d"),
    )
    fig.update_layout(template=_template(dark), margin=dict(l=0, r=0, t=20, b=20))
    return fig


def plot_category_donut(
    slices: Sequence[metrics.PieSlice],
    highlight: HighlightState | None = None,
    currency_symbol: str = "$",
    dark: bool = False,
) -> go.Figure:
    """Donut of category weights; non-highlighted slices are dimmed."""

    if not slices:
        return _empty_figure("No category spend to display.", dark)

    state = highlight or HighlightState()
    indices = np.arange(len(slices))
    active = -1 if state.active_index is None else state.active_index
    colors = [_with_alpha(item["color"], state.opacity(index)) for index, item in enumerate(slices)]
    amounts = [0.0 if item["is_empty"] else item["value"] for item in slices]

    fig = go.Figure(
        go.Pie(
            labels=[item["name"] for item in slices],
            values=[item["value"] for item in slices],
            customdata=amounts,
            hole=0.45,
            sort=False,
            marker=dict(colors=colors, line=dict(width=0)),
            pull=np.where(indices == active, 0.06, 0.0).tolist(),
            textinfo="percent",
            hovertemplate=f"%{{label}}<br>{currency_symbol}%{{customdata:,.2f}} (%{{percent}})<extra></extra>",
        )
    )
    fig.update_layout(
        template=_template(dark),
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="v", yanchor="middle", y=0.5),
    )
    return fig


def plot_spending_trend(
    points: Iterable[Mapping[str, object]],
    overlay: OverlaySelection,
    currency_symbol: str = "$",
    dark: bool = False,
) -> go.Figure:
    """Monthly spend as stacked categories, total only, or total plus one overlay."""

    df = pd.DataFrame(metrics.normalize_trend(points))
    if df.empty:
        return _empty_figure("No monthly trend available.", dark)

    fig = go.Figure()
    if overlay.stacked:
        # Reverse canonical order so housing sits on top of the stack.
        for key in reversed(overlay.series()):
            color = samples.TREND_COLORS.get(key, "#9ca3af")
            fig.add_trace(
                go.Scatter(
                    name=overlay.label(key),
                    x=df["month"],
                    y=df[key],
                    mode="lines",
                    stackgroup="categories",
                    line=dict(color=color, width=1.5),
                    fillcolor=_with_alpha(color, 0.55),
                )
            )
    else:
        for key in overlay.series():
            color = samples.TREND_COLORS.get(key, "#9ca3af")
            fig.add_trace(
                go.Scatter(
                    name="Total" if key == "total" else overlay.label(key),
                    x=df["month"],
                    y=df[key] if key in df else np.zeros(len(df)),
                    mode="lines+markers",
                    fill="tozeroy",
                    line=dict(color=color, width=2),
                    fillcolor=_with_alpha(color, 0.15 if key == "total" else 0.45),
                    marker=dict(size=6),
                )
            )

    fig.update_layout(
        template=_template(dark),
        hovermode="x unified",
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_yaxes(tickprefix=currency_symbol)
    return fig


def plot_income_vs_expenses(
    points: Iterable[Mapping[str, object]],
    currency_symbol: str = "$",
    dark: bool = False,
) -> go.Figure:
    data = list(points)
    if not data:
        return _empty_figure("No income or expense history available.", dark)

    df = pd.DataFrame(
        [
            {
                "month": str(point.get("month", "")),
                "income": utils.as_float(point.get("income")),
                "expenses": utils.as_float(point.get("expenses")),
            }
            for point in data
        ]
    )
    df["net"] = df["income"] - df["expenses"]

    fig = go.Figure()
    fig.add_bar(
        name="Income",
        x=df["month"],
        y=df["income"],
        marker_color=INCOME_COLOR,
        customdata=df["net"],
        hovertemplate=f"Income {currency_symbol}%{{y:,.0f}}<br>Net {currency_symbol}%{{customdata:,.0f}}<extra></extra>",
    )
    fig.add_bar(
        name="Expenses",
        x=df["month"],
        y=df["expenses"],
        marker_color=EXPENSES_COLOR,
        hovertemplate=f"Expenses {currency_symbol}%{{y:,.0f}}<extra></extra>",
    )
    fig.update_layout(
        template=_template(dark),
        barmode="group",
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_yaxes(tickprefix=currency_symbol)
    return fig


def plot_needs_vs_wants(
    points: Iterable[metrics.NeedsWantsPoint],
    currency_symbol: str = "$",
    dark: bool = False,
) -> go.Figure:
    data = list(points)
    if not data:
        return _empty_figure("No needs or wants data available.", dark)

    df = pd.DataFrame(data)
    fig = go.Figure()
    fig.add_bar(name="Needs", x=df["month"], y=df["needs"], marker_color=NEEDS_COLOR)
    fig.add_bar(name="Wants", x=df["month"], y=df["wants"], marker_color=WANTS_COLOR)
    fig.update_layout(
        template=_template(dark),
        barmode="group",
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_yaxes(tickprefix=currency_symbol)
    return fig


def plot_daily_spend(
    entries: Iterable[Mapping[str, object]],
    currency_symbol: str = "$",
    dark: bool = False,
) -> go.Figure:
    df = utils.ensure_dataframe(entries)
    if df.empty or "total" not in df:
        return _empty_figure("No daily spend recorded.", dark)

    dates = df["date"].fillna("") if "date" in df else pd.Series("", index=df.index)
    df["label"] = dates.astype(str).map(utils.format_date_label)
    fig = go.Figure(
        go.Bar(
            x=df["label"],
            y=df["total"].map(utils.as_float),
            marker_color="#2563eb",
            hovertemplate=f"%{{x}}<br>{currency_symbol}%{{y:,.2f}}<extra></extra>",
        )
    )
    fig.update_layout(template=_template(dark), margin=dict(l=0, r=0, t=20, b=0))
    fig.update_yaxes(tickprefix=currency_symbol)
    return fig


def transaction_row_html(row: metrics.TransactionRow, currency_symbol: str = "$") -> str:
    """Markup for one transaction list row; backend text is escaped."""

    color = html.escape(row["color"], quote=True)
    amount_class = "txn-row__amount--payment" if row["is_payment"] else ""
    return (
        '<div class="txn-row"><div style="display:flex;align-items:center;">'
        f'<span class="txn-row__icon" style="background:{color}22;color:{color};">{html.escape(row["icon"])}</span>'
        f'<div><div>{html.escape(row["name"])}</div>'
        f'<div class="txn-row__meta">{html.escape(row["category"])} • {html.escape(row["date"])}</div></div>'
        f'</div><div class="{amount_class}">{utils.format_currency(row["amount"], currency_symbol)}</div></div>'
    )


def budget_row_html(row: metrics.BudgetRow, currency_symbol: str = "$") -> str:
    color = html.escape(row["color"], quote=True)
    status = "over" if row["over_budget"] else "ok"
    marker = ""
    if row["recommended_percent"] > 0:
        marker = (
            f'<div class="budget-row__marker" style="left:{row["recommended_marker"]:.1f}%;" '
            f'title="Recommended: {row["recommended_percent"]:.1f}%"></div>'
        )
    recommended = f"{row['recommended_percent']:.1f}%" if row["recommended_percent"] > 0 else "—"
    recommended_amount = (
        utils.format_currency(row["recommended_amount"], currency_symbol) if row["recommended_amount"] else "—"
    )
    return (
        '<div class="budget-row"><div class="budget-row__header">'
        f'<span><span style="color:{color};">●</span> {html.escape(row["category"])}</span>'
        f'<span><span class="budget-row__status--{status}">{row["percent"]:.1f}% '
        f'{"↑" if row["over_budget"] else "✓"}</span> &nbsp; {utils.format_currency(row["amount"], currency_symbol)}</span>'
        '</div><div class="budget-row__track">'
        f'<div class="budget-row__bar" style="width:{row["bar_percent"]:.1f}%;background:{color};"></div>'
        f'{marker}</div><div class="budget-row__footer"><span>Recommended: {recommended}</span>'
        f"<span>{recommended_amount}</span></div></div>"
    )
