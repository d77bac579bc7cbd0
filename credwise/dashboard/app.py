"""CredWise dashboard: multi-page Dash app sharing a browser-local profile store."""

import logging

from dash import Dash, html, dcc, page_container

from credwise.config import settings

logging.basicConfig(level=settings.log_level)

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="CredWise",
)

NAV_LINKS = [
    ("Overview", "/"),
    ("Loan", "/loan"),
    ("Credit Card", "/credit-card"),
    ("Savings", "/savings"),
    ("Credit Score", "/credit-score"),
    ("DTI", "/dti"),
    ("Eligibility", "/eligibility"),
]

app.layout = html.Div([
    # Financial profile, kept in the browser's local storage
    dcc.Store(id="profile-store", storage_type="local"),

    # Navigation
    html.Nav([
        html.Div([
            html.H1("CredWise", style={"fontSize": "1.5rem", "margin": "0"}),
            html.Div([
                dcc.Link(label, href=href, style={"marginRight": "1rem", "color": "white"})
                for label, href in NAV_LINKS
            ]),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#14532d",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=settings.dashboard_port)
