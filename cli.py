#!/usr/bin/env python3
"""
Command-line interface for the ticket service.

Usage:
    python cli.py [command] [options]

Commands:
    demo        Run demo scenarios
    purchase    Buy tickets against the mock payment and seat services
    test        Run the test suite
    serve       Start the API server

Examples:
    python cli.py demo mixed
    python cli.py purchase 42 --adult 2 --child 1 --infant 1
    python cli.py serve
"""

import argparse
import subprocess
import sys

from pydantic import ValidationError

from ticketing.config import configure_logging, get_settings
from ticketing.exceptions import InvalidPurchaseError
from ticketing.models import TicketType, TicketTypeRequest

DEMO_SCENARIOS = ["valid", "mixed", "no-adult", "too-many-infants", "too-many", "all"]


def run_demo(scenario: str) -> None:
    """Run a demo scenario."""
    from ticketing.demo import SCENARIOS, run_all_demos

    if scenario == "all":
        run_all_demos()
    else:
        SCENARIOS[scenario]()


def build_requests(adult: int, child: int, infant: int) -> list[TicketTypeRequest]:
    """Build ticket requests for every ticket type given a non-zero count."""
    counts = {
        TicketType.ADULT: adult,
        TicketType.CHILD: child,
        TicketType.INFANT: infant,
    }
    return [
        TicketTypeRequest(ticket_type, quantity)
        for ticket_type, quantity in counts.items()
        if quantity
    ]


def run_purchase(account_id: int, adult: int, child: int, infant: int) -> int:
    """Run one purchase and return the process exit code."""
    from thirdparty.payment_gateway import MockTicketPaymentService
    from thirdparty.seat_booking import MockSeatReservationService
    from ticketing.ticket_service import TicketService

    payment_service = MockTicketPaymentService()
    reservation_service = MockSeatReservationService()
    ticket_service = TicketService(payment_service, reservation_service)

    try:
        requests = build_requests(adult, child, infant)
        ticket_service.purchase_tickets(account_id, *requests)
    except ValidationError as e:
        print(f"Invalid ticket request: {e.errors()[0]['msg']}")
        return 1
    except InvalidPurchaseError as e:
        print(f"Purchase rejected: {e.message}")
        return 1

    print(
        f"Purchase complete: charged £{payment_service.get_total_charged()}, "
        f"reserved {reservation_service.get_total_seats()} seats"
    )
    return 0


def run_tests(args: list[str]) -> int:
    """Run the test suite and return pytest's exit code."""
    cmd = [sys.executable, "-m", "pytest"] + args
    return subprocess.run(cmd).returncode


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = [sys.executable, "-m", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Ticket Service CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo all
  %(prog)s purchase 42 --adult 2 --child 1
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demo scenarios")
    demo_parser.add_argument(
        "scenario",
        nargs="?",
        default="all",
        choices=DEMO_SCENARIOS,
        help="Which scenario to run",
    )

    # Purchase command
    purchase_parser = subparsers.add_parser("purchase", help="Buy tickets for an account")
    purchase_parser.add_argument("account_id", type=int, help="Account making the purchase")
    purchase_parser.add_argument("--adult", type=int, default=0, help="Number of Adult tickets")
    purchase_parser.add_argument("--child", type=int, default=0, help="Number of Child tickets")
    purchase_parser.add_argument("--infant", type=int, default=0, help="Number of Infant tickets")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=settings.api_host, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=settings.api_port, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging()

    if args.command == "demo":
        run_demo(args.scenario)
    elif args.command == "purchase":
        return run_purchase(args.account_id, args.adult, args.child, args.infant)
    elif args.command == "test":
        return run_tests(args.pytest_args)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
