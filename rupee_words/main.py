from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from rupee_words import config
from rupee_words.logging_config import configure_logging
import rupee_words.routers.words as words

configure_logging()

# Get a logger for this module (rupee_words.main)
logger = logging.getLogger(__name__)
logger.info("Application starting up...")


app = FastAPI(
    title="Rupee Words API",
    version="1.0.0",
    description="Numbers and rupee amounts in words, Indian numbering system",
)

# Split the string into a list, stripping any whitespace
allowed_origins = [origin.strip() for origin in config.CORS_ALLOWED_ORIGINS.split(',')]

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(words.router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Rupee Words API!"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
