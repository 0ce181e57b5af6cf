"""Command-line front end for account search.

Commands:
    lookup ACCOUNT_NUMBER --bank CODE [--name NAME] [--json]
        Resolve an account number. A number containing ``*`` is a pattern
        search: matches are printed as they stream in, then the final result.
    banks [TEXT]
        List bank codes whose name contains TEXT (case-insensitive).

Both commands accept ``--banks-file PATH`` to load the bank directory from a
JSON object file instead of ``BANK_DIRECTORY_PATH``.

Exit codes:
    0: At least one account found (or bank listing printed)
    1: Search failed or found nothing
    2: Input rejected before anything was sent
"""

import argparse
import asyncio
import json
import sys
from typing import Any

from src.application.services import AccountSearchService
from src.core.container import (
    get_account_search_service,
    get_bank_directory,
    get_logger,
    get_stream_client,
    get_validator_api_client,
)
from src.core.result import Failure
from src.domain.entities import AccountRecord
from src.domain.protocols import BankDirectoryProtocol
from src.domain.value_objects import (
    MultipleAccounts,
    NoAccounts,
    SearchFailure,
    SearchOutcome,
    SingleAccount,
)
from src.infrastructure.bank_directory import StaticBankDirectory

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID_INPUT = 2


def format_record(record: AccountRecord) -> str:
    """One-line summary of an account record, with separately reported names."""
    line = f"{record.account_number}  {record.account_name}  ({record.bank_name})"
    if record.holder_names:
        line += f"  [{' '.join(record.holder_names)}]"
    return line


def outcome_to_dict(outcome: SearchOutcome | None) -> dict[str, Any]:
    """JSON-ready view of an outcome for ``--json`` output."""
    match outcome:
        case SingleAccount(record=record):
            return {"status": "found", "accounts": [record.to_dict()]}
        case MultipleAccounts(records=records, final=final):
            return {
                "status": "found",
                "final": final,
                "accounts": [record.to_dict() for record in records],
            }
        case NoAccounts():
            return {"status": "empty", "accounts": []}
        case SearchFailure(reason=reason, error=error):
            return {
                "status": "failed",
                "reason": reason,
                "code": error.code.value if error is not None else None,
            }
    return {"status": "cancelled"}


def print_outcome(outcome: SearchOutcome | None) -> int:
    """Print a final outcome for humans and return the exit code."""
    match outcome:
        case SingleAccount(record=record):
            print(format_record(record))
            return EXIT_FOUND
        case MultipleAccounts(records=records):
            print(f"{len(records)} matching account(s):")
            for record in records:
                print(f"  {format_record(record)}")
            return EXIT_FOUND
        case NoAccounts():
            print("No accounts found")
            return EXIT_NOT_FOUND
        case SearchFailure(reason=reason):
            print(f"Error: {reason}", file=sys.stderr)
            return EXIT_NOT_FOUND
    print("Search cancelled", file=sys.stderr)
    return EXIT_NOT_FOUND


def _load_directory(banks_file: str | None) -> BankDirectoryProtocol:
    if banks_file:
        return StaticBankDirectory.from_json_file(banks_file)
    return get_bank_directory()


def _build_service(banks_file: str | None) -> AccountSearchService:
    if banks_file is None:
        return get_account_search_service()
    return AccountSearchService(
        validator=get_validator_api_client(),
        stream=get_stream_client(),
        bank_directory=_load_directory(banks_file),
        logger=get_logger(),
    )


async def run_lookup(
    service: AccountSearchService,
    account_number: str,
    bank_code: str,
    holder_name: str | None = None,
    *,
    as_json: bool = False,
) -> int:
    """Submit one query, stream its progress to stdout and wait for the result.

    Args:
        service: Service to submit through.
        account_number: Account number as typed.
        bank_code: Bank code.
        holder_name: Optional holder name.
        as_json: Print JSON lines instead of text.

    Returns:
        int: Process exit code.
    """

    def on_outcome(outcome: SearchOutcome) -> None:
        # Interim progress only; the final outcome is printed after wait()
        if isinstance(outcome, MultipleAccounts) and not outcome.final:
            if as_json:
                print(json.dumps(outcome_to_dict(outcome)), flush=True)
            else:
                print(f"match: {format_record(outcome.records[-1])}", flush=True)

    try:
        result = await service.submit(
            account_number, bank_code, holder_name, on_outcome=on_outcome
        )
        if isinstance(result, Failure):
            if as_json:
                print(
                    json.dumps(
                        {
                            "status": "rejected",
                            "reason": result.error.message,
                            "field": result.error.field,
                        }
                    )
                )
            else:
                print(f"Error: {result.error.message}", file=sys.stderr)
            return EXIT_INVALID_INPUT

        outcome = await result.value.wait()
    finally:
        await service.close()

    if as_json:
        print(json.dumps(outcome_to_dict(outcome)))
        if isinstance(outcome, SingleAccount | MultipleAccounts):
            return EXIT_FOUND
        return EXIT_NOT_FOUND
    return print_outcome(outcome)


def list_banks(directory: BankDirectoryProtocol, text: str) -> int:
    """Print ``code  name`` for every bank whose name contains ``text``."""
    matches = directory.search(text)
    for code, name in matches:
        print(f"{code}  {name}")
    if not matches:
        print("No banks found", file=sys.stderr)
    return EXIT_FOUND


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="account-search",
        description="Validate bank account numbers or search them with * wildcards",
    )
    ap.add_argument(
        "--banks-file",
        help="JSON file mapping bank codes to names (overrides BANK_DIRECTORY_PATH)",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    lk = sub.add_parser("lookup", help="Resolve an account number or pattern")
    lk.add_argument("account_number", help="Account number; use * for unknown digits")
    lk.add_argument("--bank", required=True, dest="bank_code", help="Bank code")
    lk.add_argument("--name", dest="holder_name", default=None, help="Holder name")
    lk.add_argument("--json", action="store_true", help="Print JSON lines")

    bk = sub.add_parser("banks", help="List banks by name")
    bk.add_argument("text", nargs="?", default="", help="Substring of the bank name")

    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.cmd == "banks":
        return list_banks(_load_directory(args.banks_file), args.text)

    service = _build_service(args.banks_file)
    return asyncio.run(
        run_lookup(
            service,
            args.account_number,
            args.bank_code,
            args.holder_name,
            as_json=args.json,
        )
    )


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
