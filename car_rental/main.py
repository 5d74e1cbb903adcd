import sys
import json
import uuid
import asyncio
import logging
import argparse
from typing import List, Optional

from .config import Config, setup_logging
from .entities import CarCategory, Customer
from .errors import CategoryNotFoundError, RentalError
from .repository.json_file import read_json_list
from .service import build_rental_service

logger = logging.getLogger(__name__)


def find_category(category_id: str, path=None) -> CarCategory:
    for record in read_json_list(path or Config.CATEGORIES_DATABASE):
        if record.get("id") == category_id:
            return CarCategory.model_validate(record)
    raise CategoryNotFoundError(category_id)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Book a car rental and print the transaction.")
    parser.add_argument("category", help="Car category id")
    parser.add_argument("--name", required=True, help="Customer name")
    parser.add_argument("--age", type=int, required=True, help="Customer age")
    parser.add_argument("--days", type=int, required=True, help="Number of rental days")
    parser.add_argument("--customer-id", default=None, help="Customer id (random if omitted)")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    request_id = uuid.uuid4().hex[:8]

    try:
        service = build_rental_service()
        customer = Customer(id=args.customer_id or uuid.uuid4().hex, name=args.name, age=args.age)
        category = find_category(args.category)
        transaction = await service.rent(customer, category, args.days)
    except (RentalError, ValueError, OSError) as e:
        logger.error(f"Rental failed: {e}", extra={"request_id": request_id})
        return 1

    print(json.dumps(transaction.to_dict(), ensure_ascii=False, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(Config.LOG_LEVEL)
    if not Config.validate():
        return 1
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
