#!/usr/bin/env python3
"""
Example 1: Page Through a List Endpoint

Fetches the first page of customers, the page after it, and then every
customer in one aggregated list.

Usage:
    STRIPE_API_KEY=sk_test_... python 01_list_and_page.py --limit 5
"""

import argparse
import logging

from stripe_client import ClientConfig, EmptyPageError, StripeClient


def main():
    parser = argparse.ArgumentParser(description="Page through a Stripe list endpoint")
    parser.add_argument("--endpoint", default="customers", help="List endpoint to read")
    parser.add_argument("--limit", type=int, default=10, help="Page size for the first pages")
    parser.add_argument("--debug", action="store_true", help="Log each request")
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    config = ClientConfig.from_env()
    config.debug = config.debug or args.debug

    with StripeClient(config) as client:
        page = client.retrieve_many({"limit": args.limit}, args.endpoint)
        print(f"First page: {[item.id for item in page.data]} (has_more={page.has_more})")

        if page.has_more:
            try:
                following = client.retrieve_next(page)
                print(f"Next page: {[item.id for item in following.data]}")
            except EmptyPageError:
                print("First page was empty, nothing to continue from")

        everything = client.retrieve_all(args.endpoint)
        print(f"Total {args.endpoint}: {len(everything.data)}")


if __name__ == "__main__":
    main()
