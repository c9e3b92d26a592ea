# ============================================================
# ContextFiller FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Language table + tone list for the pickers
#   - FillerGenerator state machine (generate / reset / state)
#   - Credential lookup and saving
#   - Gemini client, or Echo client for offline dev
# ============================================================

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

# --- Local imports ---
from contextfiller.settings import settings
from contextfiller.credentials import CredentialProvider, CredentialStore
from contextfiller.languages import DEFAULT_LANGUAGE, UnknownLanguage, get_language, search_languages
from contextfiller.generate import (
    EchoDevClient,
    Failed,
    FillerGenerator,
    FillerResult,
    GenerationError,
    GenerationInProgress,
    GenerationRequest,
    GenerationState,
    MissingCredential,
    MissingSubject,
    Succeeded,
    Tone,
)

# ------------------------------------------------------------
# 📝 Logging
# ------------------------------------------------------------
logger = logging.getLogger("contextfiller")
if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    logger.addHandler(h)
logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

# ------------------------------------------------------------
# 🔧 Model client selection
# ------------------------------------------------------------
def build_model_client():
    if settings.FILLER_ENGINE.lower() == "echo":
        return EchoDevClient()
    from contextfiller.generate.clients.gemini_client import GeminiClient
    return GeminiClient(
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_BASE_URL,
        timeout=settings.GEMINI_TIMEOUT_S,
    )


credential_store = CredentialStore(settings.CREDENTIAL_STORE_PATH)
filler_gen = FillerGenerator(
    model_client=build_model_client(),
    credentials=CredentialProvider(configured=settings.GEMINI_API_KEY, store=credential_store),
)

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="ContextFiller API", version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class LanguageOut(BaseModel):
    code: str
    english_name: str
    native_name: str
    display_name: str

class GenerateRequest(BaseModel):
    subject: str = ""
    language: str = DEFAULT_LANGUAGE.code
    tone: Tone = Tone.PROFESSIONAL

class StatePayload(BaseModel):
    status: str
    subject: Optional[str] = None
    result: Optional[FillerResult] = None
    error: Optional[str] = None
    kind: Optional[str] = None

class CredentialIn(BaseModel):
    api_key: str


def state_payload(state: GenerationState) -> StatePayload:
    out = StatePayload(status=state.status, subject=filler_gen.subject)
    if isinstance(state, Succeeded):
        out.result = state.result
    elif isinstance(state, Failed):
        out.error = state.message
        out.kind = state.kind
    return out

# ------------------------------------------------------------
# 🌍 Pickers
# ------------------------------------------------------------
@app.get("/languages", response_model=List[LanguageOut])
def list_languages(q: str = Query("", description="Filter by English name, native name or code")):
    return [
        LanguageOut(code=l.code, english_name=l.english_name, native_name=l.native_name, display_name=l.display_name)
        for l in search_languages(q)
    ]

@app.get("/tones")
def list_tones():
    return {"tones": [t.value for t in Tone]}

# ------------------------------------------------------------
# ✍️ Generation
# ------------------------------------------------------------
@app.get("/state", response_model=StatePayload)
def current_state():
    return state_payload(filler_gen.state)

@app.post("/generate", response_model=StatePayload)
async def generate(req: GenerateRequest):
    try:
        language = get_language(req.language)
    except UnknownLanguage as e:
        raise HTTPException(status_code=400, detail=str(e))

    request = GenerationRequest(subject=req.subject, language=language, tone=req.tone)
    try:
        state = await filler_gen.generate(request)
    except MissingSubject as e:
        raise HTTPException(status_code=400, detail={"kind": e.kind, "message": e.message})
    except MissingCredential as e:
        raise HTTPException(status_code=401, detail={"kind": e.kind, "message": e.message})
    except GenerationInProgress as e:
        raise HTTPException(status_code=409, detail={"kind": e.kind, "message": e.message})
    except GenerationError as e:
        raise HTTPException(status_code=500, detail={"kind": e.kind, "message": e.message})
    return state_payload(state)

@app.post("/reset", response_model=StatePayload)
def reset():
    return state_payload(filler_gen.reset())

# ------------------------------------------------------------
# 🔑 Credential
# ------------------------------------------------------------
@app.get("/credential")
def credential_status() -> Dict[str, Any]:
    return {"configured": filler_gen.credentials.get_credential() is not None}

@app.put("/credential")
def save_credential(body: CredentialIn):
    try:
        credential_store.save(body.api_key)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"configured": True}

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": "ContextFiller service running."}
