"""
main.py — CLI entry point for the website marketing analyzer.

Usage:
  python main.py --url https://example.com           Print the ten analysis sections
  python main.py --url https://example.com --json    Print the JSON response body
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

logger = logging.getLogger("main")


# ── Logging setup ─────────────────────────────────────────────────────────────

def setup_logging(verbose: bool = False, log_file: str = "analyzer.log") -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


# ── Config loader ─────────────────────────────────────────────────────────────

def load_config(path: str = "config.yaml") -> dict:
    if not Path(path).exists():
        logger.warning("Config file %s not found — using defaults", path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_client(settings: dict):
    """Completion client configured from settings; the API key comes from the environment."""
    from analysis.completion import CompletionClient, DEFAULT_MAX_TOKENS, DEFAULT_MODEL

    return CompletionClient(
        api_key=os.getenv("ANTHROPIC_API_KEY", ""),
        model=settings.get("model") or DEFAULT_MODEL,
        max_tokens=settings.get("max_tokens") or DEFAULT_MAX_TOKENS,
        timeout=settings.get("completion_timeout_seconds"),
    )


# ── Core ──────────────────────────────────────────────────────────────────────

def run_analysis(url: str, config: dict) -> tuple:
    """Run one analysis; returns (status_code, response body)."""
    from analysis.pipeline import handle_analyze_request
    from scraper.crawler import DEFAULT_USER_AGENT, FETCH_TIMEOUT_SECONDS

    settings = config.get("settings") or {}
    client = build_client(settings)

    return handle_analyze_request(
        {"url": url},
        client,
        fetch_timeout=settings.get("fetch_timeout_seconds") or FETCH_TIMEOUT_SECONDS,
        user_agent=settings.get("user_agent") or DEFAULT_USER_AGENT,
    )


def print_report(url: str, body: dict) -> None:
    from analysis.sections import Section

    if "error" in body:
        print(f"\nAnalysis failed: {body['error']}\n")
        return

    analysis = body["analysis"]
    print(f"\n{'='*60}")
    print(f"  Marketing analysis for {url}")
    for section in Section:
        print(f"\n{'-'*60}")
        print(f"  {section.title}\n")
        print(analysis[section.key])
    print()


# ── CLI ───────────────────────────────────────────────────────────────────────

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="AI Marketing Expert Team — ten-section marketing analysis of a web page"
    )
    parser.add_argument("--url", required=True, help="Page to analyse")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the response body as JSON instead of a formatted report",
    )
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    load_dotenv()
    setup_logging(args.verbose)

    config = load_config(args.config)
    status, body = run_analysis(args.url, config)

    if args.json:
        print(json.dumps(body, indent=2, ensure_ascii=False))
    else:
        print_report(args.url, body)

    return 0 if status == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
