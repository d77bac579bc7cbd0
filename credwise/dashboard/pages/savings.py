"""Savings growth page: compound growth with monthly contributions."""

import dash
from dash import html, dcc, callback, Input, Output
import plotly.graph_objects as go

from credwise.dashboard.components import (
    FIELD_STYLE,
    ROW_STYLE,
    field,
    metric_card,
    money,
    tip_list,
    to_decimal,
)
from credwise.engine.savings import MAX_SAVINGS_YEARS, project_savings
from credwise.models.inputs import SavingsParameters

dash.register_page(__name__, path="/savings", name="Savings")

layout = html.Div([
    html.H2("Savings Growth Calculator"),
    html.P("See how your savings grow over time with regular contributions and compound interest."),

    html.Div([
        field("Initial Deposit", dcc.Input(id="sv-deposit", type="number", value=1000, min=0, style=FIELD_STYLE)),
        field("Monthly Contribution", dcc.Input(id="sv-contribution", type="number", value=200, min=0, style=FIELD_STYLE)),
        field("Interest Rate (%)", dcc.Input(id="sv-rate", type="number", value=5, min=0, step=0.01, style=FIELD_STYLE)),
    ], style=ROW_STYLE),
    field("Years", dcc.Slider(
        id="sv-years", min=1, max=MAX_SAVINGS_YEARS, step=1, value=10,
        marks={y: str(y) for y in (1, 10, 20, 30, 40, 50)},
    )),

    html.Div(id="sv-results", style={"marginTop": "1.5rem"}),
])


def _growth_chart(result):
    labels = ["Start" if p.year == 0 else f"Year {p.year}" for p in result.yearly_series]
    fig = go.Figure()
    for name, attr, color in (
        ("Balance", "balance", "#2ecc71"),
        ("Contributions", "contributions", "#3498db"),
        ("Interest", "interest", "#9b59b6"),
    ):
        fig.add_trace(go.Scatter(
            x=labels,
            y=[float(getattr(p, attr)) for p in result.yearly_series],
            mode="lines+markers",
            name=name,
            line=dict(color=color, width=3),
        ))
    fig.update_layout(title="Savings Growth", hovermode="x unified")
    return fig


@callback(
    Output("sv-results", "children"),
    Input("sv-deposit", "value"),
    Input("sv-contribution", "value"),
    Input("sv-rate", "value"),
    Input("sv-years", "value"),
)
def update_savings(deposit, contribution, rate, years):
    deposit = to_decimal(deposit)
    contribution = to_decimal(contribution)
    rate = to_decimal(rate)
    if None in (deposit, contribution, rate) or min(deposit, contribution, rate) < 0:
        return html.P("Enter non-negative amounts and a rate.")

    result = project_savings(SavingsParameters(
        initial_deposit=deposit,
        monthly_contribution=contribution,
        annual_rate_pct=rate,
        years=int(years or 0),
    ))
    if not result.yearly_series:
        return html.P(f"Choose between 1 and {MAX_SAVINGS_YEARS} years.")

    return html.Div([
        html.Div([
            metric_card("Final Balance", money(result.final_balance), color="#27ae60"),
            metric_card("Total Contributions", money(result.total_contributions)),
            metric_card("Total Interest", money(result.total_interest)),
            metric_card("Interest % of Total", f"{result.interest_share_pct}%"),
        ], style=ROW_STYLE),
        dcc.Graph(figure=_growth_chart(result)),
        tip_list("Savings Growth Insights", [
            f"The power of compound interest: {money(result.total_interest)} of your final "
            "balance comes from interest earnings.",
            "Consider high-yield savings accounts or CDs to potentially earn higher interest rates.",
        ]),
    ])
