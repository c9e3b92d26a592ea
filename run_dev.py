# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn contextfiller.app:app --reload --host 0.0.0.0 --port 8000`
Set FILLER_ENGINE=echo to run without calling Gemini.
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "contextfiller.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
