import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from generic_cards.config.loader import DeckConfig
from generic_cards.core.deck import DeckType

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Set up logging for the command line tools. Cards go to stdout, logs to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True  # Force reconfiguration of logging
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generic-cards",
        description="Build a deck, shuffle it and print the cards top to bottom.",
    )
    parser.add_argument("--config", type=Path, help="JSON deck configuration file")
    parser.add_argument("--no-jokers", action="store_true", help="use a 52-card deck instead of 54")
    parser.add_argument("--shuffles", type=int, default=10, help="random shuffles (default: 10)")
    parser.add_argument("--ideal", type=int, default=0, help="out-shuffles after the random ones")
    parser.add_argument("--cut", type=int, help="cards to cut from top to bottom")
    parser.add_argument("--seed", type=int, help="seed for reproducible shuffles")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def load_config(args: argparse.Namespace) -> DeckConfig:
    """A config file wins over the individual options."""
    if args.config is not None:
        return DeckConfig.from_file(args.config)
    return DeckConfig.from_dict({
        "deckType": (DeckType.STANDARD_52 if args.no_jokers else DeckType.STANDARD_54).value,
        "seed": args.seed,
        "shuffles": args.shuffles,
        "idealShuffles": args.ideal,
        "cut": args.cut,
    })


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    deck = config.build_deck()
    logger.info(f"Printing {deck.size} cards")
    for card in deck:
        print(card.name)
    return 0
