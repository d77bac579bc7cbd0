"""Loan calculator page: payment, totals, yearly principal/interest split."""

import dash
from dash import html, dcc, callback, Input, Output, dash_table
import plotly.graph_objects as go

from credwise.dashboard.components import (
    FIELD_STYLE,
    ROW_STYLE,
    field,
    metric_card,
    money,
    to_decimal,
)
from credwise.engine.debt import simulate_loan_amortization
from credwise.models.inputs import LoanParameters, TermUnit

dash.register_page(__name__, path="/loan", name="Loan")

layout = html.Div([
    html.H2("Loan Calculator"),
    html.P("Calculate your monthly payment and see how each payment splits between principal and interest."),

    html.Div([
        field("Loan Amount", dcc.Input(id="loan-amount", type="number", value=200000, min=0, style=FIELD_STYLE)),
        field("Interest Rate (%)", dcc.Input(id="loan-rate", type="number", value=5.5, min=0, step=0.01, style=FIELD_STYLE)),
        field("Loan Term", dcc.Input(id="loan-term", type="number", value=30, min=1, style=FIELD_STYLE)),
        field("Term Unit", dcc.Dropdown(
            id="loan-term-unit",
            options=[{"label": "Years", "value": "years"}, {"label": "Months", "value": "months"}],
            value="years",
            clearable=False,
        )),
    ], style=ROW_STYLE),

    html.Div(id="loan-results"),
])


def _yearly_chart(result):
    years = [f"Year {y.year}" for y in result.yearly_series]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=years, y=[float(y.principal) for y in result.yearly_series],
        name="Principal", marker_color="#2ecc71",
    ))
    fig.add_trace(go.Bar(
        x=years, y=[float(y.interest) for y in result.yearly_series],
        name="Interest", marker_color="#e94560",
    ))
    fig.update_layout(
        barmode="stack",
        title="Principal vs Interest by Year",
        yaxis_title="Amount",
        hovermode="x unified",
    )
    return fig


@callback(
    Output("loan-results", "children"),
    Input("loan-amount", "value"),
    Input("loan-rate", "value"),
    Input("loan-term", "value"),
    Input("loan-term-unit", "value"),
)
def update_loan(amount, rate, term, unit):
    principal = to_decimal(amount)
    annual_rate = to_decimal(rate)
    if not principal or principal <= 0 or annual_rate is None or annual_rate < 0 or not term:
        return html.P("Enter a positive loan amount, a rate and a term.")

    result = simulate_loan_amortization(LoanParameters(
        principal=principal,
        annual_rate_pct=annual_rate,
        term=int(term),
        term_unit=TermUnit(unit),
    ))
    if result.term_months == 0:
        return html.P("Enter a positive loan amount, a rate and a term.")

    rows = [
        {
            "period": p.period,
            "payment": money(p.payment),
            "principal": money(p.principal),
            "interest": money(p.interest),
            "balance": money(p.balance),
        }
        for p in result.schedule
    ]

    return html.Div([
        html.Div([
            metric_card("Monthly Payment", money(result.monthly_payment)),
            metric_card("Total Payment", money(result.total_payment)),
            metric_card("Total Interest", money(result.total_interest), color="#e94560"),
        ], style=ROW_STYLE),
        dcc.Graph(figure=_yearly_chart(result)),
        html.H4(f"First {len(rows)} Payments"),
        dash_table.DataTable(
            data=rows,
            columns=[{"name": c.title(), "id": c} for c in ("period", "payment", "principal", "interest", "balance")],
            style_cell={"textAlign": "right", "padding": "0.4rem"},
        ),
    ])
