import argparse
import asyncio
import sys

from azure.core.exceptions import AzureError

from app.core.env_check import load_environment
from app.services.key_vault import KeyVaultService

async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check Azure Key Vault authentication.")
    parser.add_argument("--vault-url", help="Overrides AZURE_KEY_VAULT_URL")
    parser.add_argument("--secret", help="Name of a secret to fetch (its value is never printed)")
    args = parser.parse_args(argv)

    load_environment()
    service = KeyVaultService(args.vault_url)
    if not service.configured:
        print("AZURE_KEY_VAULT_URL is not set.")
        return 1

    print(f"Authenticating against {service.vault_url} ...")
    result = await service.health_check()
    print(f"Status: {result['status']}")
    if result["status"] != "healthy":
        print(f"Error: {result.get('error')}")
        return 1

    if args.secret:
        try:
            value = await service.get_secret(args.secret)
        except AzureError as e:
            print(f"Could not read secret {args.secret}: {e}")
            return 1
        print(f"Secret {args.secret}: {'present' if value else 'empty'} ({len(value or '')} chars)")
    return 0

if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
