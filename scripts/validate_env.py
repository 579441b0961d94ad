import argparse
import sys

from app.core.env_check import TARGETS, environment_status, find_missing, load_environment

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check that required deployment variables are set.")
    parser.add_argument("--target", choices=sorted(TARGETS), default="all")
    parser.add_argument("--no-dotenv", action="store_true", help="Only look at the process environment")
    args = parser.parse_args(argv)

    if not args.no_dotenv:
        load_environment()

    print("Environment status:")
    for name, value in environment_status().items():
        print(f"   {name}: {value}")

    missing = find_missing(args.target)
    if missing:
        print(f"Missing required environment variables ({args.target}):")
        for name in missing:
            print(f"   - {name}")
        return 1

    print(f"All required {args.target} environment variables are set.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
