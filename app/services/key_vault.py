import logging
from typing import Any

from azure.identity.aio import DefaultAzureCredential
from azure.keyvault.secrets.aio import SecretClient

from app.core.config import settings

logger = logging.getLogger(__name__)

class KeyVaultService:
    """
    Thin async wrapper over Azure Key Vault used for health checks and
    the credential debugging script.
    """
    def __init__(self, vault_url: str | None = None):
        self.vault_url = vault_url if vault_url is not None else settings.AZURE_KEY_VAULT_URL

    @property
    def configured(self) -> bool:
        return bool(self.vault_url)

    async def health_check(self) -> dict[str, Any]:
        if not self.configured:
            return {"status": "not_configured"}

        try:
            async with DefaultAzureCredential() as credential:
                async with SecretClient(vault_url=self.vault_url, credential=credential) as client:
                    async for _ in client.list_properties_of_secrets():
                        break
            return {"status": "healthy", "vaultUrl": self.vault_url}
        except Exception as e:
            # Bad URLs, transport and credential failures all mean the vault is unusable
            logger.exception("Key Vault health check failed")
            return {"status": "unhealthy", "vaultUrl": self.vault_url, "error": str(e)}

    async def get_secret(self, name: str) -> str | None:
        if not self.configured:
            raise RuntimeError("AZURE_KEY_VAULT_URL is not configured")

        async with DefaultAzureCredential() as credential:
            async with SecretClient(vault_url=self.vault_url, credential=credential) as client:
                secret = await client.get_secret(name)
                return secret.value

key_vault = KeyVaultService()
