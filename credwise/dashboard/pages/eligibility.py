"""Loan eligibility page: maximum loan and approval odds."""

import dash
from dash import html, dcc, callback, Input, Output

from credwise.dashboard.components import (
    FIELD_STYLE,
    RATING_COLORS,
    ROW_STYLE,
    field,
    metric_card,
    money,
    tip_list,
    to_decimal,
)
from credwise.engine.eligibility import resolve_eligibility
from credwise.models.inputs import EligibilityInput, EmploymentStatus, LoanType

dash.register_page(__name__, path="/eligibility", name="Eligibility")

LOAN_TYPE_LABELS = {
    LoanType.MORTGAGE: "Mortgage",
    LoanType.AUTO: "Auto Loan",
    LoanType.PERSONAL: "Personal Loan",
    LoanType.STUDENT: "Student Loan",
}

EMPLOYMENT_LABELS = {
    EmploymentStatus.FULL_TIME: "Full-time",
    EmploymentStatus.PART_TIME: "Part-time",
    EmploymentStatus.SELF_EMPLOYED: "Self-employed",
    EmploymentStatus.RETIRED: "Retired",
    EmploymentStatus.UNEMPLOYED: "Unemployed",
}

layout = html.Div([
    html.H2("Loan Eligibility Checker"),
    html.P("Estimate your loan approval chances and maximum eligible amount."),

    html.Div([
        field("Loan Type", dcc.Dropdown(
            id="el-loan-type",
            options=[{"label": v, "value": k.value} for k, v in LOAN_TYPE_LABELS.items()],
            value=LoanType.MORTGAGE.value,
            clearable=False,
        )),
        field("Gross Monthly Income", dcc.Input(id="el-income", type="number", value=5000, min=0, style=FIELD_STYLE)),
        field("Existing Monthly Debt", dcc.Input(id="el-debt", type="number", value=1500, min=0, style=FIELD_STYLE)),
        field("Employment Status", dcc.Dropdown(
            id="el-employment",
            options=[{"label": v, "value": k.value} for k, v in EMPLOYMENT_LABELS.items()],
            value=EmploymentStatus.FULL_TIME.value,
            clearable=False,
        )),
    ], style=ROW_STYLE),
    field("Credit Score", dcc.Slider(
        id="el-score", min=300, max=850, step=1, value=700,
        marks={300: "300", 580: "580", 670: "670", 740: "740", 850: "850"},
        tooltip={"placement": "bottom", "always_visible": True},
    )),

    html.Div(id="el-results", style={"marginTop": "1.5rem"}),
])


def _approval_bar(chance, color):
    return html.Div(
        html.Div(style={
            "width": f"{chance}%",
            "backgroundColor": color or "#888",
            "height": "100%",
            "borderRadius": "4px",
        }),
        style={"width": "100%", "height": "12px", "backgroundColor": "#eee", "borderRadius": "4px"},
    )


@callback(
    Output("el-results", "children"),
    Input("el-loan-type", "value"),
    Input("el-income", "value"),
    Input("el-debt", "value"),
    Input("el-employment", "value"),
    Input("el-score", "value"),
)
def update_eligibility(loan_type, income, debt, employment, score):
    income = to_decimal(income)
    debt = to_decimal(debt)
    if income is None or debt is None or debt < 0:
        return html.P("Enter your monthly income and existing debt payments.")

    result = resolve_eligibility(EligibilityInput(
        monthly_income=income,
        existing_monthly_debt=debt,
        credit_score=int(score),
        loan_type=LoanType(loan_type),
        employment_status=EmploymentStatus(employment),
    ))
    if result.approval_rating is None:
        return tip_list("Loan Eligibility", result.tips)

    color = RATING_COLORS.get(result.approval_rating.label)
    return html.Div([
        html.Div([
            metric_card("Eligible Amount", money(result.max_eligible_principal)),
            metric_card("Approval Chance", f"{result.approval_chance_pct}% ({result.approval_rating.label})", color=color),
            metric_card("Your DTI / Max DTI", f"{result.current_dti}% / {result.max_dti}%"),
            metric_card("Rate / Term", f"{result.interest_rate}% / {result.term_months} mo"),
        ], style=ROW_STYLE),
        _approval_bar(result.approval_chance_pct, color),
        tip_list("Recommendations", result.tips),
    ])
