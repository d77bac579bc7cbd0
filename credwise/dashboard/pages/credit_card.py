"""Credit card payoff page: months to zero, total interest, balance curve."""

from decimal import Decimal

import dash
from dash import html, dcc, callback, Input, Output
import plotly.graph_objects as go

from credwise.dashboard.components import (
    FIELD_STYLE,
    ROW_STYLE,
    WARNING_STYLE,
    field,
    metric_card,
    money,
    tip_list,
    to_decimal,
)
from credwise.engine.payoff import simulate_payoff
from credwise.models.inputs import PayoffParameters
from credwise.models.results import PayoffStatus

dash.register_page(__name__, path="/credit-card", name="Credit Card")

TIPS = [
    "Pay more than the minimum whenever you can; extra payments go straight to principal.",
    "Consider transferring your balance to a card with a lower interest rate or 0% intro APR.",
    "Make bi-weekly payments instead of monthly to reduce interest and pay off faster.",
]

layout = html.Div([
    html.H2("Credit Card Payoff Calculator"),
    html.P("Calculate how long it will take to pay off your credit card and how much interest you'll pay."),

    html.Div([
        field("Current Balance", dcc.Input(id="cc-balance", type="number", value=5000, min=0, style=FIELD_STYLE)),
        field("Interest Rate (APR %)", dcc.Input(id="cc-rate", type="number", value=18.99, min=0, step=0.01, style=FIELD_STYLE)),
        field("Monthly Payment", dcc.Input(id="cc-payment", type="number", value=200, min=0, style=FIELD_STYLE)),
    ], style=ROW_STYLE),

    html.Div(id="cc-results"),
    tip_list("Tips to Pay Off Faster", TIPS),
])


def _payoff_chart(result):
    months = [f"Month {p.period}" for p in result.series]
    fig = go.Figure()
    for name, values, color in (
        ("Balance", [float(p.balance) for p in result.series], "#2ecc71"),
        ("Interest", [float(p.interest) for p in result.series], "#e94560"),
        ("Principal", [float(p.principal) for p in result.series], "#3498db"),
    ):
        fig.add_trace(go.Scatter(x=months, y=values, mode="lines", name=name, line=dict(color=color, width=2)))
    fig.update_layout(title="Payoff Timeline", hovermode="x unified")
    return fig


@callback(
    Output("cc-results", "children"),
    Input("cc-balance", "value"),
    Input("cc-rate", "value"),
    Input("cc-payment", "value"),
)
def update_payoff(balance, rate, payment):
    result = simulate_payoff(PayoffParameters(
        balance=to_decimal(balance, Decimal("0")),
        annual_rate_pct=to_decimal(rate, Decimal("0")),
        monthly_payment=to_decimal(payment, Decimal("0")),
    ))

    if result.status is PayoffStatus.INVALID_INPUT:
        return html.P("Enter a positive balance and monthly payment, and a non-negative rate.")
    if result.status is PayoffStatus.PAYMENT_TOO_LOW:
        return html.Div([
            html.H4("Payment Too Low", style={"marginTop": 0}),
            html.P(
                "Your monthly payment is less than the monthly interest. It must be higher than "
                f"{money(result.minimum_payment)} to reduce the principal."
            ),
        ], style=WARNING_STYLE)

    months_label = "month" if result.months == 1 else "months"
    children = [
        html.Div([
            metric_card("Time to Pay Off", f"{result.months} {months_label}"),
            metric_card("Total Interest", money(result.total_interest), color="#e94560"),
            metric_card("Total Payment", money(result.total_paid)),
        ], style=ROW_STYLE),
    ]
    if result.status is PayoffStatus.CAPPED:
        children.append(html.Div(
            "At this payment the balance is still not paid off after 50 years.",
            style=WARNING_STYLE,
        ))
    children.append(dcc.Graph(figure=_payoff_chart(result)))
    return html.Div(children)
