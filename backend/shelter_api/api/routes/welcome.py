"""Welcome Route - static HTML fragment served at the API root."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["welcome"])

WELCOME_PAGE = """
    <h2>Lambda Shelter API</h>
    <p>Welcome to the Lambda Shelter API</p>
  """


@router.get("/", response_class=HTMLResponse)
async def welcome():
    return WELCOME_PAGE
