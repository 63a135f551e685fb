import uvicorn

from jobmatch.config import settings


def main():
    uvicorn.run("jobmatch.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
