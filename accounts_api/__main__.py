"""Run the API with uvicorn: ``python -m accounts_api``."""
import uvicorn

from accounts_api.config import settings


def main() -> None:
    uvicorn.run("accounts_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
