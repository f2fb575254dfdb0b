"""Run the ledger API with uvicorn"""

import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)

if __name__ == "__main__":
    # Ledger state lives in this process, so a single worker and no reloader
    uvicorn.run(
        app,
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        workers=1,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
