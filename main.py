"""Main entry point for the GitLab external status checks CLI."""

import logging
from getpass import getpass

from cli.cli import run_cli
from config.settings import ACCESS_TOKEN, BASE_URL, LOG_LEVEL
from core.api_client import Client

def main():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    print(f"GitLab external status checks - {BASE_URL}")
    token = ACCESS_TOKEN or getpass("Enter your GitLab access token: ")

    with Client(token) as client:
        run_cli(client)

if __name__ == "__main__":
    main()
