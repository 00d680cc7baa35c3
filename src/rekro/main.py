"""Command line entry point: quote a pricing context, score a profile or serve the API."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rekro.config import Settings
from rekro.logging import configure_logging, get_logger
from rekro.models.profile import ProfileCompletion, ProfileCompletionDetails, UserProfile
from rekro.pricing.orchestrator import quote_from_payload
from rekro.profile.completion import calculate_profile_completion, details_from_user

logger = get_logger(__name__)


def _read_json(path: Path) -> Any:
    """Load a JSON file, exiting with status 1 if it cannot be read."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("input_file_unreadable", path=str(path), error=str(e))
        sys.exit(1)


def score_profile_file(data: Any) -> ProfileCompletion:
    """Score a ``{"user": ..., "details": ..., "documents": ...}`` document.

    Raises:
        ValidationError: If the user or details do not match their models.
    """
    data = data if isinstance(data, dict) else {}
    user = UserProfile.model_validate(data["user"]) if data.get("user") is not None else None
    if data.get("details") is not None:
        details = ProfileCompletionDetails.model_validate(data["details"])
    else:
        details = details_from_user(user) if user is not None else None
    return calculate_profile_completion(user, details, data.get("documents"))


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Rekro - rental pricing and profile completion")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--serve",
        action="store_true",
        help="Start the JSON API web server",
    )
    mode.add_argument(
        "--quote",
        type=Path,
        metavar="FILE",
        help="Print the weekly quote for a JSON pricing context",
    )
    mode.add_argument(
        "--profile",
        type=Path,
        metavar="FILE",
        help="Print profile completion for a JSON {user, details, documents} file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    args = parser.parse_args(argv)

    configure_logging(json_output=False, level=logging.DEBUG if args.debug else logging.INFO)

    try:
        settings = Settings()
        pricing_config = settings.get_pricing_config()
    except (ValidationError, ValueError) as e:
        logger.error("failed_to_load_settings", error=str(e))
        print(f"Error: Failed to load settings. {e}")
        print("Check the REKRO_* environment variables and your .env file.")
        sys.exit(1)

    if args.serve:
        import uvicorn

        from rekro.web.app import create_app

        app = create_app(settings)
        uvicorn.run(app, host=settings.web_host, port=settings.web_port, log_level="info")
    elif args.quote is not None:
        payload = _read_json(args.quote)
        result = quote_from_payload(payload if isinstance(payload, dict) else None, config=pricing_config)
        print(result.model_dump_json(indent=2))
    else:
        data = _read_json(args.profile)
        try:
            completion = score_profile_file(data)
        except ValidationError as e:
            logger.error("profile_file_invalid", path=str(args.profile), error_count=e.error_count())
            sys.exit(1)
        print(completion.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
