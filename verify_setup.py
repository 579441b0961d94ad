from app.core.env_check import environment_status, find_missing, load_environment

try:
    env_file = load_environment()
    print(f"Loaded .env: {env_file or 'none'}")
    for name, value in environment_status().items():
        print(f"   {name}: {value}")

    from app.main import app
    from app.core.config import settings
    print(f"Loaded Settings: {settings.PROJECT_NAME} ({settings.NODE_ENV})")
    print(f"MongoDB URL source: {'MONGODB_URI' if settings.MONGODB_URI else 'MONGODB_CONNECTION_STRING' if settings.MONGODB_CONNECTION_STRING else 'default'}")
    missing = find_missing("backend")
    if missing:
        print(f"WARNING: missing {', '.join(missing)}")
    print("SUCCESS")
except Exception as e:
    import traceback
    traceback.print_exc()
    print(f"ERROR: {e}")
    exit(1)
