"""Check that the OPENAI_* environment resolves to a usable client.

Usage:
    openaix-check
"""

import argparse
import sys
from typing import List, Optional
from openai import OpenAIError
from .client import ClientConfig, resolve_client
from .utils import OpenAIXError


def print_section(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def main(argv: Optional[List[str]] = None) -> int:
    """Resolve a client from the environment and print a summary.

    Returns:
        Process exit code (0 on success, 1 on configuration or client error)
    """
    parser = argparse.ArgumentParser(
        prog="openaix-check",
        description="Validate OPENAI_* environment configuration.",
    )
    parser.parse_args(argv)

    print_section("OpenAI Client Configuration")

    try:
        config = ClientConfig.from_env()
    except OpenAIXError as e:
        print(f"❌ {e}")
        return 1

    for key, value in config.describe().items():
        print(f"✅ {key}: {value}")

    if not config.api_key.get_secret_value():
        print("❌ OPENAI_API_KEY is not set")
        return 1

    try:
        client = resolve_client(config)
    except OpenAIError as e:
        print(f"❌ {e}")
        return 1

    print(f"✅ client: {client.__class__.__name__}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
