"""
WSGI entrypoint.

Serverless hosts and WSGI servers import `app`; running the module
(or the `classroom-api` script) starts the development server unless
VERCEL=1.
"""
from classroom_api import create_app
from classroom_api.config import config

app = create_app()


def main():
    if config.IS_SERVERLESS:
        app.logger.info("Serverless host detected; not starting a listener")
        return
    app.logger.info(f"Backend running at http://localhost:{config.PORT}")
    app.run(host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    main()
