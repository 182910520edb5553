"""MCP Server — katakana reference and quiz tools.

Registers:
- list_characters / lookup_character / list_categories  (reference table)
- select_difficulty / build_quiz                         (quiz generation)
"""

from __future__ import annotations

import argparse
import logging
import os

from mcp.server.fastmcp import FastMCP

from katakana_quiz.bank import QuestionBank
from katakana_quiz.quiz_engine import QuestionGenerator
from katakana_quiz.random_source import RandomSource
from katakana_quiz.tools import quiz, reference

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

mcp = FastMCP("katakana-quiz")

bank = QuestionBank()
generator = QuestionGenerator(bank)

reference.register(mcp, bank)
quiz.register(mcp, generator)

# Network transports and the MCP transport name they map to
NETWORK_TRANSPORTS = {"sse": "sse", "http": "streamable-http"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Katakana quiz MCP server")
    transport = parser.add_mutually_exclusive_group()
    transport.add_argument(
        "--sse",
        type=int,
        metavar="PORT",
        help="Serve over SSE on PORT instead of stdio",
    )
    transport.add_argument(
        "--http",
        type=int,
        metavar="PORT",
        help="Serve over Streamable HTTP on PORT instead of stdio",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Bind address for --sse/--http (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=int(os.environ["QUIZ_SEED"]) if os.environ.get("QUIZ_SEED") else None,
        help="Seed the quiz generator for reproducible quizzes",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log at DEBUG level",
    )
    return parser


def main(argv: list[str] | None = None):
    """Run the MCP server."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.seed is not None:
        generator.rng = RandomSource(args.seed)

    if args.sse:
        name, port = "sse", args.sse
    elif args.http:
        name, port = "http", args.http
    else:
        logger.info("Starting katakana quiz MCP server on stdio")
        mcp.run(transport="stdio")
        return

    logger.info(
        "Starting katakana quiz MCP server (%s on %s:%d)", name, args.host, port
    )
    mcp.settings.host = args.host
    mcp.settings.port = port
    mcp.run(transport=NETWORK_TRANSPORTS[name])


if __name__ == "__main__":
    main()
