from fastapi import FastAPI
from fastapi.responses import PlainTextResponse


GREETING = (
    "Hello CRM! This is your first microservice running. "
    "Welcome to the future of customer relations."
)

# Docs routes are disabled so that every path other than "/" falls through to 404
app = FastAPI(title="hello-crm", docs_url=None, redoc_url=None, openapi_url=None)


# Express-style: a GET route also answers HEAD
@app.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def greeting():
    """Static greeting. Request headers, query string and body are ignored."""
    return GREETING
