from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.db.session import get_database, ping_database
from app.services.key_vault import key_vault
from app.utils.dates import utc_now

router = APIRouter()

@router.get("/health")
async def health_check() -> Any:
    """
    Reports database and Key Vault status; 503 when either is down.
    """
    database = get_database()
    db_up = await ping_database(database)
    vault = await key_vault.health_check()
    healthy = db_up and vault["status"] in ("healthy", "not_configured")

    content = {
        "success": healthy,
        "data": {
            "status": "OK" if healthy else "DEGRADED",
            "timestamp": utc_now().isoformat() + "Z",
            "environment": settings.NODE_ENV,
            "services": {
                "database": {"status": "connected" if db_up else "disconnected", "name": database.name},
                "keyVault": vault,
            },
        },
    }
    return JSONResponse(status_code=200 if healthy else 503, content=content)

@router.get("/ping")
async def ping() -> Any:
    """
    Smoke test for a fresh deployment: confirms the function is reachable
    and reports which pieces of configuration it can see.
    """
    return {
        "success": True,
        "message": "Greenstagram API is reachable",
        "data": {
            "environment": settings.NODE_ENV,
            "timestamp": utc_now().isoformat() + "Z",
            "mongodbConfigured": bool(settings.MONGODB_URI or settings.MONGODB_CONNECTION_STRING),
            "jwtConfigured": bool(settings.JWT_SECRET),
        },
    }
