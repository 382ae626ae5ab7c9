#!/usr/bin/env python3
"""
Example 2: Create Resources

Creates a customer through a schema cast, then charges it with a request
descriptor that casts the customer object down to its id.

Usage:
    STRIPE_API_KEY=sk_test_... python 02_create_with_request.py --email jenny@example.com
"""

import argparse

from stripe_client import ClientConfig, RequestDescriptor, RequestOptions, StripeClient

CUSTOMER_SCHEMA = {
    "email": ["create", "update"],
    "description": ["create", "update"],
    "metadata": ["create", "update"],
}


def main():
    parser = argparse.ArgumentParser(description="Create a customer and charge it")
    parser.add_argument("--email", required=True, help="Customer email")
    parser.add_argument("--amount", type=int, default=2000, help="Amount in the smallest currency unit")
    parser.add_argument("--idempotency-key", help="Idempotency key for the charge")
    args = parser.parse_args()

    with StripeClient(ClientConfig.from_env()) as client:
        customer = client.create(
            "customers",
            {"email": args.email, "metadata": {"source": "example"}, "ignored": True},
            CUSTOMER_SCHEMA,
        )
        print(f"Created customer {customer.id}")

        charge = (
            RequestDescriptor.new(RequestOptions(idempotency_key=args.idempotency_key))
            .put_endpoint("payment_intents")
            .put_method("post")
            .put_params({"amount": args.amount, "currency": "usd"})
            .put_param("customer", customer)
            .cast_to_id(["customer"])
        )
        intent = client.execute(charge)
        print(f"Created payment intent {intent.id} for {intent.amount}")


if __name__ == "__main__":
    main()
