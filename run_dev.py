# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn rolebot.app:app --reload --host 0.0.0.0 --port 3001`
"""

import uvicorn

from rolebot.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "rolebot.app:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
