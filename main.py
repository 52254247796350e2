import argparse
import json
import logging
import sys

from database.config import get_db_context, init_db
from services.creator_import import import_creators, normalize_stored_categories

# Configure Logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)


def run_normalize_categories():
    logging.info("Normalizing creator categories...")
    with get_db_context() as db:
        result = normalize_stored_categories(db)
    logging.info(f"Normalization complete. Updated {result['updated']} of {result['total']} creators.")


def run_import_creators(path):
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    # Accept a bare list or {"items": [...]}
    items = payload.get("items") if isinstance(payload, dict) else payload

    logging.info(f"Importing creators from {path}...")
    with get_db_context() as db:
        result = import_creators(db, items)
    for row in result["creators"]:
        logging.info(f"  {row['username']} <{row['email']}>")
    logging.info(f"Import complete. {result['imported']} creators upserted.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Inverso maintenance tasks")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create all tables")
    subparsers.add_parser("normalize-categories", help="Lowercase and deduplicate stored creator categories")
    import_parser = subparsers.add_parser("import-creators", help="Bulk import creators from a JSON file")
    import_parser.add_argument("file", help="JSON file: a list of records or {\"items\": [...]}")

    args = parser.parse_args(argv)

    if args.command == "init-db":
        init_db()
    elif args.command == "normalize-categories":
        run_normalize_categories()
    else:
        run_import_creators(args.file)


if __name__ == "__main__":
    main()
