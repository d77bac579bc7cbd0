"""Command line front end to the calculators.

Usage:
    python -m credwise.cli loan 200000 5.5 --term 30
    python -m credwise.cli payoff 5000 18.99 200
    python -m credwise.cli savings 1000 200 5 --years 10
    python -m credwise.cli score --history 95 --utilization 30 --age 5 --mix 3 --inquiries 2
    python -m credwise.cli dti 5000 1400
    python -m credwise.cli eligibility 5000 1500 700 --loan-type mortgage
"""

import argparse
import logging
import sys
from decimal import Decimal

from credwise.config import settings
from credwise.engine.credit_score import credit_rating, credit_score_tips, estimate_credit_score
from credwise.engine.debt import simulate_loan_amortization
from credwise.engine.dti import compute_dti
from credwise.engine.eligibility import resolve_eligibility
from credwise.engine.payoff import simulate_payoff
from credwise.engine.savings import project_savings
from credwise.models.inputs import (
    EligibilityInput,
    EmploymentStatus,
    LoanParameters,
    LoanType,
    PayoffParameters,
    SavingsParameters,
    ScoreFactors,
    TermUnit,
)
from credwise.models.results import PayoffStatus


def _money(value) -> str:
    return f"{settings.currency_symbol}{value:,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def _tips(tips: list[str]) -> None:
    if tips:
        print()
        for tip in tips:
            print(f"  - {tip}")
    print()


def run_loan(args) -> int:
    result = simulate_loan_amortization(LoanParameters(
        principal=args.principal,
        annual_rate_pct=args.rate,
        term=args.term,
        term_unit=TermUnit(args.unit),
    ))
    if result.term_months == 0:
        print("Principal must be positive and rate non-negative.", file=sys.stderr)
        return 1

    _header("Loan Amortization")
    print(f"  Monthly payment:  {_money(result.monthly_payment)}")
    print(f"  Total payment:    {_money(result.total_payment)}")
    print(f"  Total interest:   {_money(result.total_interest)}")
    print()
    print(f"  {'Year':>4}  {'Principal':>14}  {'Interest':>14}  {'Balance':>14}")
    for y in result.yearly_series:
        print(f"  {y.year:>4}  {_money(y.principal):>14}  {_money(y.interest):>14}  {_money(y.ending_balance):>14}")
    print()
    return 0


def run_payoff(args) -> int:
    result = simulate_payoff(PayoffParameters(
        balance=args.balance,
        annual_rate_pct=args.rate,
        monthly_payment=args.payment,
    ))
    if result.status is PayoffStatus.INVALID_INPUT:
        print("Balance and monthly payment must be positive and rate non-negative.", file=sys.stderr)
        return 1
    if result.status is PayoffStatus.PAYMENT_TOO_LOW:
        print(
            "Payment too low: it must be higher than "
            f"{_money(result.minimum_payment)} to reduce the principal.",
            file=sys.stderr,
        )
        return 2

    _header("Credit Card Payoff")
    months = "month" if result.months == 1 else "months"
    print(f"  Time to pay off:  {result.months} {months}")
    print(f"  Total interest:   {_money(result.total_interest)}")
    print(f"  Total paid:       {_money(result.total_paid)}")
    if result.status is PayoffStatus.CAPPED:
        print("  Not paid off within 50 years at this payment.")
    print()
    return 0


def run_savings(args) -> int:
    result = project_savings(SavingsParameters(
        initial_deposit=args.deposit,
        monthly_contribution=args.contribution,
        annual_rate_pct=args.rate,
        years=args.years,
    ))
    if not result.yearly_series:
        print("Years must be between 1 and 50 and rate non-negative.", file=sys.stderr)
        return 1

    _header("Savings Growth")
    print(f"  Final balance:       {_money(result.final_balance)}")
    print(f"  Total contributions: {_money(result.total_contributions)}")
    print(f"  Total interest:      {_money(result.total_interest)} ({result.interest_share_pct}% of balance)")
    print()
    return 0


def run_score(args) -> int:
    factors = ScoreFactors(
        payment_history_pct=args.history,
        utilization_pct=args.utilization,
        credit_age_years=args.age,
        credit_mix_count=args.mix,
        hard_inquiries=args.inquiries,
    )
    score = estimate_credit_score(factors)
    _header("Credit Score Simulator")
    print(f"  Estimated score:  {score} ({credit_rating(score).label})")
    _tips(credit_score_tips(factors))
    return 0


def run_dti(args) -> int:
    result = compute_dti(args.income, args.debt)
    if result.ratio is None:
        print("Monthly income must be positive.", file=sys.stderr)
        return 1

    _header("Debt-to-Income")
    print(f"  DTI ratio:        {result.ratio}% ({result.rating.label})")
    print(f"  {result.rating.description}")
    _tips(result.tips)
    return 0


def run_eligibility(args) -> int:
    result = resolve_eligibility(EligibilityInput(
        monthly_income=args.income,
        existing_monthly_debt=args.debt,
        credit_score=args.score,
        loan_type=LoanType(args.loan_type),
        employment_status=EmploymentStatus(args.employment),
    ))
    _header("Loan Eligibility")
    print(f"  Eligible amount:  {_money(result.max_eligible_principal)}")
    if result.approval_rating is not None:
        print(f"  Approval chance:  {result.approval_chance_pct}% ({result.approval_rating.label})")
    print(f"  Rate / term:      {result.interest_rate}% over {result.term_months} months")
    print(f"  DTI:              {result.current_dti}% of max {result.max_dti}%")
    _tips(result.tips)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="credwise", description="Personal finance calculators")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("loan", help="Loan payment and amortization")
    p.add_argument("principal", type=Decimal)
    p.add_argument("rate", type=Decimal, help="Annual rate in percent")
    p.add_argument("--term", type=int, default=30)
    p.add_argument("--unit", choices=[u.value for u in TermUnit], default=TermUnit.YEARS.value)
    p.set_defaults(func=run_loan)

    p = sub.add_parser("payoff", help="Credit card payoff timeline")
    p.add_argument("balance", type=Decimal)
    p.add_argument("rate", type=Decimal, help="Annual rate in percent")
    p.add_argument("payment", type=Decimal, help="Monthly payment")
    p.set_defaults(func=run_payoff)

    p = sub.add_parser("savings", help="Savings growth projection")
    p.add_argument("deposit", type=Decimal)
    p.add_argument("contribution", type=Decimal, help="Monthly contribution")
    p.add_argument("rate", type=Decimal, help="Annual rate in percent")
    p.add_argument("--years", type=int, default=10)
    p.set_defaults(func=run_savings)

    p = sub.add_parser("score", help="Credit score simulator")
    p.add_argument("--history", type=Decimal, default=Decimal("95"), help="On-time payments, percent")
    p.add_argument("--utilization", type=Decimal, default=Decimal("30"), help="Percent of limit used")
    p.add_argument("--age", type=Decimal, default=Decimal("5"), help="Credit age in years")
    p.add_argument("--mix", type=int, default=3, help="Account types, 1-5")
    p.add_argument("--inquiries", type=int, default=2)
    p.set_defaults(func=run_score)

    p = sub.add_parser("dti", help="Debt-to-income ratio")
    p.add_argument("income", type=Decimal, help="Gross monthly income")
    p.add_argument("debt", type=Decimal, help="Monthly debt payments")
    p.set_defaults(func=run_dti)

    p = sub.add_parser("eligibility", help="Loan eligibility check")
    p.add_argument("income", type=Decimal, help="Gross monthly income")
    p.add_argument("debt", type=Decimal, help="Existing monthly debt payments")
    p.add_argument("score", type=int, help="Credit score, 300-850")
    p.add_argument("--loan-type", choices=[t.value for t in LoanType], default=LoanType.MORTGAGE.value)
    p.add_argument(
        "--employment",
        choices=[s.value for s in EmploymentStatus],
        default=EmploymentStatus.FULL_TIME.value,
    )
    p.set_defaults(func=run_eligibility)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
