"""Credit score simulator page: adjust factors, watch the score move."""

import dash
from dash import html, dcc, callback, Input, Output
import plotly.graph_objects as go

from credwise.dashboard.components import RATING_COLORS, ROW_STYLE, field, tip_list, to_decimal
from credwise.engine.credit_score import (
    SCORE_MAX,
    SCORE_MIN,
    WEIGHTS,
    credit_rating,
    credit_score_tips,
    estimate_credit_score,
)
from credwise.models.inputs import ScoreFactors

dash.register_page(__name__, path="/credit-score", name="Credit Score")

FACTOR_LABELS = {
    "payment_history": "Payment History",
    "utilization": "Credit Utilization",
    "credit_age": "Credit Age",
    "credit_mix": "Credit Mix",
    "inquiries": "Hard Inquiries",
}


def _slider(id_, min_, max_, value, unit=""):
    return dcc.Slider(
        id=id_, min=min_, max=max_, step=1, value=value,
        marks={min_: f"{min_}{unit}", max_: f"{max_}{unit}"},
        tooltip={"placement": "bottom", "always_visible": True},
    )


def _weights_chart():
    fig = go.Figure(go.Pie(
        labels=[f"{FACTOR_LABELS[k]} ({int(w * 100)}%)" for k, w in WEIGHTS.items()],
        values=[float(w) for w in WEIGHTS.values()],
        marker=dict(colors=["#10b981", "#34d399", "#6ee7b7", "#a7f3d0", "#d1fae5"]),
        hole=0.4,
    ))
    fig.update_layout(title="Credit Score Breakdown")
    return fig


layout = html.Div([
    html.H2("Credit Score Simulator"),
    html.P("Adjust the factors below to see how they affect your credit score."),

    html.Div(id="cs-score", style={"textAlign": "center", "marginBottom": "2rem"}),

    html.Div([
        html.Div([
            field("Payment History (% on time)", _slider("cs-history", 0, 100, 95, "%")),
            field("Credit Utilization (%)", _slider("cs-utilization", 0, 100, 30, "%")),
            field("Credit Age (years)", _slider("cs-age", 0, 30, 5)),
            field("Credit Mix (account types)", _slider("cs-mix", 1, 5, 3)),
            field("Hard Inquiries (last 2 years)", _slider("cs-inquiries", 0, 10, 2)),
        ], style={"width": "50%", "display": "flex", "flexDirection": "column", "gap": "1.5rem"}),
        html.Div(dcc.Graph(figure=_weights_chart()), style={"width": "50%"}),
    ], style=ROW_STYLE),

    html.Div(id="cs-tips"),
])


@callback(
    Output("cs-score", "children"),
    Output("cs-tips", "children"),
    Input("cs-history", "value"),
    Input("cs-utilization", "value"),
    Input("cs-age", "value"),
    Input("cs-mix", "value"),
    Input("cs-inquiries", "value"),
)
def update_score(history, utilization, age, mix, inquiries):
    factors = ScoreFactors(
        payment_history_pct=to_decimal(history),
        utilization_pct=to_decimal(utilization),
        credit_age_years=to_decimal(age),
        credit_mix_count=int(mix),
        hard_inquiries=int(inquiries),
    )
    score = estimate_credit_score(factors)
    rating = credit_rating(score)

    score_panel = html.Div([
        html.Div(str(score), style={"fontSize": "3.5rem", "fontWeight": "bold"}),
        html.Div(rating.label, style={"fontSize": "1.3rem", "color": RATING_COLORS.get(rating.label)}),
        html.Div(f"Credit score range: {SCORE_MIN}-{SCORE_MAX}", style={"color": "#888"}),
    ])
    tips = credit_score_tips(factors)
    return score_panel, tip_list("Tips to Improve Your Score", tips) if tips else None
