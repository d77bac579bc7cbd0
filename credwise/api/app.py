"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from credwise.api.routes import loan, credit_card, savings, credit, eligibility
from credwise.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="CredWise",
    description="Personal finance calculators",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(loan.router)
app.include_router(credit_card.router)
app.include_router(savings.router)
app.include_router(credit.router)
app.include_router(eligibility.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
