"""CLI entrypoint for the gifgrid server."""

import argparse
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="gifgrid server")
    parser.add_argument(
        "--host", default=os.environ.get("GIFGRID_HOST", "127.0.0.1"), help="Bind address"
    )
    parser.add_argument(
        "--port", type=int, default=int(os.environ.get("GIFGRID_PORT", "8000")), help="Bind port"
    )
    parser.add_argument("--api-key", default=None, help="Giphy API key (overrides GIFGRID_GIPHY_API_KEY)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    if args.api_key:
        os.environ["GIFGRID_GIPHY_API_KEY"] = args.api_key

    uvicorn.run(
        "gifgrid.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
