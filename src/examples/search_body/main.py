"""
Builds a few request bodies and prints them as JSON.

Run with:
    python src/examples/search_body/main.py --dialect v1 --log-level DEBUG
"""

import argparse
import json

from rich.console import Console

from querybody import Dialect, bodybuilder, setup_logging


def _products_body():
    return (
        bodybuilder()
        .query("multi_match", {"query": "running shoes", "fields": ["title", "description"]})
        .filter("term", "in_stock", True)
        .not_filter("term", "brand", "acme")
        .aggregation(
            "terms",
            "brand",
            options={"size": 10, "_meta": {"widget": "facet"}},
            name="brands",
            nested=lambda a: a.aggregation("avg", "price"),
        )
        .sort([{"price": "asc"}, "_score"], "desc")
        .from_(0)
        .size(24)
    )


def _nearby_body():
    return (
        bodybuilder()
        .query(
            "nested",
            "path",
            "reviews",
            nested=lambda q: q.query("range", "reviews.rating", {"gte": 4}),
        )
        .sort(
            [
                {"_geo_distance": {"store.location": [-70, 40], "order": "asc", "unit": "km"}},
                {"_geo_distance": {"warehouse.location": [-71, 41], "order": "asc", "unit": "km"}},
            ]
        )
        .raw_option("_source", ["title", "price"])
    )


def main():
    parser = argparse.ArgumentParser(description="Print sample search request bodies.")
    parser.add_argument(
        "--dialect",
        choices=[d.value for d in Dialect],
        default=Dialect.Default.value,
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    console = Console()
    setup_logging(level=args.log_level, pretty=True, console=console)

    for title, builder in (("products", _products_body()), ("nearby", _nearby_body())):
        console.rule(title)
        console.print_json(json.dumps(builder.build(args.dialect)))


if __name__ == "__main__":
    main()
