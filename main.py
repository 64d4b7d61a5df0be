import os
import re
import uuid
import shutil
import asyncio
import subprocess
from typing import Optional, List, Dict, Any, Callable, Awaitable
from dataclasses import dataclass
from enum import Enum

import httpx
import imageio_ffmpeg
import openai
import uvicorn
from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from openai import AsyncOpenAI
from playwright.async_api import async_playwright, Error as PlaywrightError
from pydantic import BaseModel


# --- CONFIGURATION ---

MIN_PROMPT_LENGTH = 5
FRAME_PATTERN = "frame_%05d.jpg"
DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


@dataclass
class PipelineConfig:
    """Everything a pipeline run needs to know, resolved once at startup"""
    provider: str = "gemini"              # gemini, openai
    model: str = DEFAULT_MODELS["gemini"]
    gemini_api_key: str = ""
    temperature: float = 0.4
    max_output_tokens: int = 8000
    request_timeout: float = 120.0
    width: int = 1280                     # 720p for better performance/speed ratio
    height: int = 720
    fps: int = 30
    duration: int = 5                     # seconds
    crf: int = 23
    frame_quality: int = 80               # JPEG quality for captured frames
    navigation_timeout_ms: int = 30000
    temp_dir: str = "temp"
    video_dir: str = os.path.join("public", "videos")
    public_prefix: str = "/videos"

    @property
    def total_frames(self) -> int:
        return self.fps * self.duration

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        provider = os.environ.get("LLM_PROVIDER", "gemini").strip().lower()
        if provider not in DEFAULT_MODELS:
            print(f"⚠️ Unknown LLM_PROVIDER '{provider}', falling back to gemini")
            provider = "gemini"
        current_folder = os.getcwd()
        return cls(
            provider=provider,
            model=os.environ.get("LLM_MODEL", "").strip() or DEFAULT_MODELS[provider],
            gemini_api_key=os.environ.get("GEMINI_API_KEY", ""),
            temperature=_env_float("LLM_TEMPERATURE", 0.4),
            max_output_tokens=_env_int("LLM_MAX_TOKENS", 8000),
            request_timeout=_env_float("LLM_TIMEOUT_SECS", 120.0),
            width=_env_int("VIDEO_WIDTH", 1280),
            height=_env_int("VIDEO_HEIGHT", 720),
            fps=_env_int("VIDEO_FPS", 30),
            duration=_env_int("VIDEO_DURATION", 5),
            crf=_env_int("VIDEO_CRF", 23),
            frame_quality=_env_int("FRAME_QUALITY", 80),
            navigation_timeout_ms=_env_int("NAVIGATION_TIMEOUT_MS", 30000),
            temp_dir=os.environ.get("TEMP_DIR", os.path.join(current_folder, "temp")),
            video_dir=os.environ.get("VIDEO_DIR", os.path.join(current_folder, "public", "videos")),
        )


# --- ERRORS ---

class PipelineError(Exception):
    """Base for every failure a pipeline run can end with"""
    status_code = 500
    user_message = "Failed to generate video. Please try a different prompt."

    def __init__(self, message: str = ""):
        super().__init__(message or self.user_message)


class InvalidRequest(PipelineError):
    status_code = 400
    user_message = "Prompt is too short."

    def __init__(self, message: str = ""):
        super().__init__(message)
        if message:
            self.user_message = message


class GenerationBlocked(PipelineError):
    """The text service returned no usable candidate"""
    status_code = 422

    def __init__(self, reason: str = ""):
        self.reason = reason or "unknown"
        super().__init__(f"Generation blocked: {self.reason}")
        self.user_message = f"The prompt was rejected by the model ({self.reason}). Please try a different prompt."


class GenerationUnavailable(PipelineError):
    status_code = 502
    user_message = "The generation service is unavailable. Please try again later."


class CaptureFailed(PipelineError):
    pass


class EncodingFailed(PipelineError):
    """Encoder exited non-zero; `diagnostics` holds its stderr"""

    def __init__(self, diagnostics: str, returncode: Optional[int] = None):
        self.diagnostics = diagnostics
        self.returncode = returncode
        super().__init__(f"FFmpeg Error (exit {returncode}): {diagnostics}")


# --- SESSIONS ---

class SessionState(str, Enum):
    """Lifecycle of one pipeline run"""
    CREATED = "created"
    GENERATING_MARKUP = "generating_markup"
    CAPTURING = "capturing"
    ENCODING = "encoding"
    DONE = "done"
    FAILED = "failed"


@dataclass
class Session:
    session_id: str
    prompt: str
    work_dir: str
    video_path: str
    video_url: str
    width: int
    height: int
    fps: int
    duration: int
    state: SessionState = SessionState.CREATED

    @property
    def frames_dir(self) -> str:
        return os.path.join(self.work_dir, "frames")

    @property
    def total_frames(self) -> int:
        return self.fps * self.duration

    def advance(self, state: SessionState) -> None:
        if self.state in (SessionState.DONE, SessionState.FAILED):
            raise RuntimeError(f"Session {self.session_id} already finished ({self.state.value})")
        print(f"🔄 [{self.session_id}] {self.state.value} -> {state.value}")
        self.state = state


@dataclass
class FrameSet:
    """Ordered frames on disk, lexical order == temporal order"""
    directory: str
    count: int
    fps: int
    pattern: str = FRAME_PATTERN

    @property
    def input_pattern(self) -> str:
        return os.path.join(self.directory, self.pattern)

    def files_on_disk(self) -> List[str]:
        prefix, _, suffix = self.pattern.partition("%05d")
        if not os.path.isdir(self.directory):
            return []
        return sorted(
            f for f in os.listdir(self.directory)
            if f.startswith(prefix) and f.endswith(suffix)
        )


@dataclass
class PipelineResult:
    session_id: str
    video_url: str
    video_path: str
    frame_count: int


# --- MARKUP GENERATOR ---

SYSTEM_INSTRUCTION = """You are a creative front-end developer. Create a single self-contained HTML/CSS/JS animation.
Rules:
- Return ONLY raw HTML. No markdown, no backticks, no explanations.
- The document must start with <!DOCTYPE html> and end with </html>.
- Use only inline <style> and <script> blocks; no other external files.
- You may include GSAP: <script src="https://cdn.jsdelivr.net/npm/gsap@3.12.5/dist/gsap.min.js"></script>
- The animation must start automatically on load, fill the whole viewport and keep moving for at least {duration} seconds.
- Design for a {width}x{height} viewport."""

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

# Thresholds applied to every category below
SAFETY_CATEGORIES = [
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
]

_FENCE_RE = re.compile(r"```(?:html)?", re.IGNORECASE)


def sanitize_markup(text: str) -> str:
    """Strip code fences the model adds despite instructions"""
    return _FENCE_RE.sub("", text or "").strip()


class MarkupGenerator:
    """Turns a prompt into an HTML document via Gemini (REST) or OpenAI"""

    def __init__(self, config: PipelineConfig,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 openai_client: Optional[Any] = None):
        self.config = config
        self._transport = transport
        self._openai_client = openai_client

    def system_instruction(self) -> str:
        return SYSTEM_INSTRUCTION.format(
            duration=self.config.duration, width=self.config.width, height=self.config.height
        )

    async def generate(self, prompt: str, session_id: str = "-") -> str:
        print(f"✨ [{session_id}] Generating markup with {self.config.provider}/{self.config.model}")
        if self.config.provider == "openai":
            raw = await self._call_openai(prompt)
        else:
            raw = await self._call_gemini(prompt)

        html = sanitize_markup(raw)
        if not html:
            raise GenerationBlocked("empty response")
        print(f"✅ [{session_id}] Markup generated ({len(html)} chars)")
        return html

    def gemini_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "systemInstruction": {"parts": [{"text": self.system_instruction()}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.config.temperature,
                "maxOutputTokens": self.config.max_output_tokens,
            },
            "safetySettings": [
                {"category": category, "threshold": "BLOCK_NONE"} for category in SAFETY_CATEGORIES
            ],
        }

    async def _call_gemini(self, prompt: str) -> str:
        if not self.config.gemini_api_key:
            raise GenerationUnavailable("GEMINI_API_KEY is not set")

        url = GEMINI_ENDPOINT.format(model=self.config.model)
        try:
            async with httpx.AsyncClient(timeout=self.config.request_timeout,
                                         transport=self._transport) as client:
                response = await client.post(
                    url,
                    headers={"x-goog-api-key": self.config.gemini_api_key},
                    json=self.gemini_body(prompt),
                )
        except httpx.HTTPError as e:
            raise GenerationUnavailable(f"Gemini request error: {e!r}") from e

        if response.status_code != 200:
            raise GenerationUnavailable(f"Gemini HTTP {response.status_code}: {response.text[:400]}")

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationUnavailable("Gemini returned a non-JSON body") from e

        return extract_gemini_text(data)

    async def _call_openai(self, prompt: str) -> str:
        if self._openai_client is None:
            self._openai_client = AsyncOpenAI(timeout=self.config.request_timeout)
        try:
            response = await self._openai_client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": self.system_instruction()},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.config.temperature,
                max_tokens=self.config.max_output_tokens,
            )
        except openai.OpenAIError as e:
            raise GenerationUnavailable(f"OpenAI request error: {e}") from e

        if not response.choices:
            raise GenerationBlocked("no choices returned")
        choice = response.choices[0]
        refusal = getattr(choice.message, "refusal", None)
        if refusal:
            raise GenerationBlocked(refusal)
        if choice.finish_reason == "content_filter":
            raise GenerationBlocked("content_filter")
        return choice.message.content or ""


def extract_gemini_text(data: Dict[str, Any]) -> str:
    """Pull the candidate text out of a generateContent response, or raise GenerationBlocked"""
    block_reason = (data.get("promptFeedback") or {}).get("blockReason")
    if block_reason:
        raise GenerationBlocked(block_reason)

    candidates = data.get("candidates") or []
    if not candidates:
        raise GenerationBlocked("no candidates returned")

    candidate = candidates[0]
    parts = (candidate.get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts)
    finish_reason = candidate.get("finishReason", "")
    if not text.strip() and finish_reason and finish_reason != "STOP":
        raise GenerationBlocked(finish_reason)
    return text


# --- FRAME CAPTURE ENGINE ---

class FrameCaptureEngine:
    """Loads a document in headless Chromium and screenshots it at a fixed rate"""

    def __init__(self, config: PipelineConfig, playwright_factory: Callable[[], Any] = async_playwright):
        self.config = config
        self._playwright_factory = playwright_factory

    async def render(self, document: str, session: Session) -> FrameSet:
        html_path = os.path.abspath(os.path.join(session.work_dir, "index.html"))
        total_frames = session.total_frames
        try:
            os.makedirs(session.frames_dir, exist_ok=True)
            with open(html_path, "w", encoding="utf-8") as f:
                f.write(document)

            async with self._playwright_factory() as p:
                browser = await p.chromium.launch(
                    headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"]
                )
                try:
                    page = await browser.new_page(viewport={"width": session.width, "height": session.height})
                    await page.goto(
                        f"file://{html_path}",
                        wait_until="networkidle",
                        timeout=self.config.navigation_timeout_ms,
                    )
                    print(f"📊 [{session.session_id}] Capturing {total_frames} frames "
                          f"({session.width}x{session.height} @ {session.fps}fps)")
                    await self._capture_frames(page, session, total_frames)
                finally:
                    try:
                        await browser.close()
                    except PlaywrightError as e:
                        print(f"⚠️ [{session.session_id}] Browser close failed: {e}")
        except (PlaywrightError, OSError) as e:
            raise CaptureFailed(f"Capture failed: {e}") from e

        print(f"✅ [{session.session_id}] Captured {total_frames} frames")
        return FrameSet(directory=session.frames_dir, count=total_frames, fps=session.fps)

    async def _capture_frames(self, page: Any, session: Session, total_frames: int) -> None:
        loop = asyncio.get_running_loop()
        interval = 1.0 / session.fps
        for index in range(total_frames):
            started = loop.time()
            await page.screenshot(
                path=os.path.join(session.frames_dir, FRAME_PATTERN % index),
                type="jpeg",
                quality=self.config.frame_quality,
            )
            # Best-effort pacing: slow captures are not caught up
            remaining = interval - (loop.time() - started)
            if remaining > 0 and index < total_frames - 1:
                await asyncio.sleep(remaining)


# --- VIDEO ASSEMBLER ---

async def run_command(cmd: List[str]) -> str:
    """Run an external command to completion; non-zero exit raises EncodingFailed with stderr"""
    try:
        result = await asyncio.to_thread(subprocess.run, cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        raise EncodingFailed(str(e)) from e
    if result.returncode != 0:
        diagnostics = (result.stderr or result.stdout or "").strip()
        raise EncodingFailed(diagnostics or "no diagnostic output", returncode=result.returncode)
    return result.stdout


class VideoAssembler:
    """Stitches a frame set into an H.264 MP4 with ffmpeg"""

    def __init__(self, config: PipelineConfig,
                 runner: Callable[[List[str]], Awaitable[str]] = run_command,
                 ffmpeg_exe: Optional[str] = None):
        self.config = config
        self._runner = runner
        self._ffmpeg_exe = ffmpeg_exe

    def ffmpeg_exe(self) -> str:
        if self._ffmpeg_exe is None:
            try:
                self._ffmpeg_exe = imageio_ffmpeg.get_ffmpeg_exe()
            except RuntimeError as e:
                raise EncodingFailed(f"ffmpeg not available: {e}") from e
        return self._ffmpeg_exe

    def build_command(self, frame_set: FrameSet, output_path: str) -> List[str]:
        return [
            self.ffmpeg_exe(), "-y",
            "-framerate", str(frame_set.fps),
            "-i", frame_set.input_pattern,
            "-c:v", "libx264",
            "-crf", str(self.config.crf),
            "-pix_fmt", "yuv420p",  # plays everywhere
            "-movflags", "+faststart",
            output_path,
        ]

    async def encode(self, frame_set: FrameSet, output_path: str) -> str:
        found = len(frame_set.files_on_disk())
        if found != frame_set.count:
            raise CaptureFailed(f"Frame set incomplete: expected {frame_set.count} frames, found {found}")

        cmd = self.build_command(frame_set, output_path)
        print(f"🎬 Encoding {frame_set.count} frames: codec=libx264, CRF={self.config.crf}, fps={frame_set.fps}")
        try:
            await self._runner(cmd)
        except EncodingFailed:
            if os.path.exists(output_path):
                os.remove(output_path)
            raise
        return output_path


# --- PIPELINE ORCHESTRATOR ---

class VideoPipeline:
    """prompt -> markup -> frames -> mp4, one isolated workspace per run"""

    def __init__(self, config: PipelineConfig,
                 generator: Optional[MarkupGenerator] = None,
                 renderer: Optional[FrameCaptureEngine] = None,
                 encoder: Optional[VideoAssembler] = None):
        self.config = config
        self.generator = generator or MarkupGenerator(config)
        self.renderer = renderer or FrameCaptureEngine(config)
        self.encoder = encoder or VideoAssembler(config)

        os.makedirs(config.temp_dir, exist_ok=True)
        os.makedirs(config.video_dir, exist_ok=True)

    def video_path_for(self, session_id: str) -> str:
        return os.path.join(self.config.video_dir, f"video_{session_id}.mp4")

    def new_session(self, prompt: str) -> Session:
        session_id = uuid.uuid4().hex
        file_name = f"video_{session_id}.mp4"
        return Session(
            session_id=session_id,
            prompt=prompt,
            work_dir=os.path.join(self.config.temp_dir, session_id),
            video_path=self.video_path_for(session_id),
            video_url=f"{self.config.public_prefix}/{file_name}",
            width=self.config.width,
            height=self.config.height,
            fps=self.config.fps,
            duration=self.config.duration,
        )

    async def run(self, prompt: Any) -> PipelineResult:
        prompt = prompt.strip() if isinstance(prompt, str) else ""
        if len(prompt) < MIN_PROMPT_LENGTH:
            raise InvalidRequest("Prompt is too short.")

        session = self.new_session(prompt)
        os.makedirs(session.work_dir)
        print(f"🎨 [{session.session_id}] New session: {prompt[:60]!r}")

        try:
            session.advance(SessionState.GENERATING_MARKUP)
            document = await self.generator.generate(prompt, session.session_id)

            session.advance(SessionState.CAPTURING)
            frame_set = await self.renderer.render(document, session)
            if frame_set.count != session.total_frames:
                raise CaptureFailed(
                    f"Expected {session.total_frames} frames, renderer produced {frame_set.count}"
                )

            session.advance(SessionState.ENCODING)
            await self.encoder.encode(frame_set, session.video_path)

            session.advance(SessionState.DONE)
            print(f"✅ [{session.session_id}] Render Complete: {session.video_url}")
            return PipelineResult(
                session_id=session.session_id,
                video_url=session.video_url,
                video_path=session.video_path,
                frame_count=frame_set.count,
            )
        except Exception as e:
            session.advance(SessionState.FAILED)
            print(f"❌ [{session.session_id}] {type(e).__name__}: {e}")
            raise
        finally:
            cleanup_workspace(session)


def cleanup_workspace(session: Session) -> None:
    """Remove the session's working directory; failures are logged, never raised"""
    try:
        shutil.rmtree(session.work_dir)
    except FileNotFoundError:
        pass
    except OSError as e:
        print(f"⚠️ [{session.session_id}] Cleanup failed for {session.work_dir}: {e}")


# --- API ---

app = FastAPI()

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}

pipeline = VideoPipeline(PipelineConfig.from_env())
app.mount(pipeline.config.public_prefix, StaticFiles(directory=pipeline.config.video_dir), name="videos")


def get_pipeline() -> VideoPipeline:
    return pipeline


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    # No CSP: generated documents and the UI load scripts from CDNs
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


class PromptRequest(BaseModel):
    """Body of POST /generate; non-string prompts are rejected by the pipeline"""
    prompt: Any = None


@app.get("/", response_class=HTMLResponse)
async def home():
    return """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Prompt to Video</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: 'Inter', -apple-system, sans-serif; background: #0a0a0a; color: white; min-height: 100vh; padding: 40px 20px; }
        .container { max-width: 700px; margin: 0 auto; }
        h1 { font-size: 32px; font-weight: 700; margin-bottom: 8px; }
        .subtitle { color: #888; margin-bottom: 30px; }
        label { display: block; font-size: 14px; color: #888; margin-bottom: 8px; }
        textarea { width: 100%; min-height: 110px; padding: 16px; font-size: 16px; border: 1px solid #333; border-radius: 8px; background: #111; color: white; margin-bottom: 20px; resize: vertical; font-family: inherit; }
        textarea:focus { outline: none; border-color: #6366f1; }
        button { width: 100%; padding: 16px; font-size: 16px; font-weight: 600; border: none; border-radius: 8px; background: linear-gradient(135deg, #6366f1, #ec4899); color: white; cursor: pointer; transition: transform 0.2s, opacity 0.2s; }
        button:hover { transform: translateY(-2px); }
        button:disabled { opacity: 0.5; cursor: not-allowed; transform: none; }
        .status { margin-top: 30px; padding: 20px; border-radius: 8px; background: #111; border: 1px solid #222; }
        .hidden { display: none; }
        video { width: 100%; border-radius: 8px; margin-top: 10px; }
        .download-btn { display: inline-block; margin-top: 15px; padding: 12px 24px; background: #22c55e; border-radius: 6px; color: white; text-decoration: none; font-weight: 600; }
        .download-btn:hover { background: #16a34a; }
        .error { color: #ef4444; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Prompt to Video</h1>
        <p class="subtitle">Describe an animation, get back a 5 second MP4.</p>
        <form id="promptForm">
            <label for="userPrompt">Prompt</label>
            <textarea id="userPrompt" placeholder="bouncing ball on blue background"></textarea>
            <button id="submitBtn" type="submit">Generate Video</button>
        </form>
        <div id="status" class="status hidden"></div>
        <div id="videoContainer" class="status hidden">
            <video id="mainVideo" controls autoplay loop muted></video>
            <a id="downloadBtn" class="download-btn" href="#">Download MP4</a>
        </div>
    </div>
    <script>
        const form = document.querySelector('#promptForm');
        const input = document.querySelector('#userPrompt');
        const btn = document.querySelector('#submitBtn');
        const status = document.querySelector('#status');
        const videoContainer = document.querySelector('#videoContainer');

        form.addEventListener('submit', async (e) => {
            e.preventDefault();
            const prompt = input.value.trim();
            if (!prompt) return alert('Please enter a prompt.');

            btn.disabled = true;
            videoContainer.classList.add('hidden');
            status.classList.remove('hidden');
            status.textContent = 'Generating animation and rendering frames...';

            try {
                const response = await fetch('/generate', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify({ prompt })
                });
                const data = await response.json();
                if (!response.ok) throw new Error(data.error || 'Server error');

                document.querySelector('#mainVideo').src = data.videoUrl;
                document.querySelector('#downloadBtn').href = '/download/' + data.sessionId;
                status.classList.add('hidden');
                videoContainer.classList.remove('hidden');
            } catch (err) {
                status.innerHTML = '<span class="error"></span>';
                status.querySelector('.error').textContent = 'Error: ' + err.message;
            } finally {
                btn.disabled = false;
            }
        });
    </script>
</body>
</html>
"""


@app.post("/generate")
async def generate(request: Optional[PromptRequest] = None, pipeline: VideoPipeline = Depends(get_pipeline)):
    """Prompt -> generated HTML -> captured frames -> MP4"""
    try:
        result = await pipeline.run(request.prompt if request else None)
    except PipelineError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.user_message})
    except Exception as e:
        print(f"❌ Process Error: {e!r}")
        return JSONResponse(status_code=500, content={"error": PipelineError.user_message})

    return {"videoUrl": result.video_url, "sessionId": result.session_id}


_SESSION_ID_RE = re.compile(r"^[0-9a-f]{32}$")


@app.get("/download/{session_id}")
async def download_video(session_id: str, pipeline: VideoPipeline = Depends(get_pipeline)):
    """Download a generated video by session id"""
    if not _SESSION_ID_RE.match(session_id):
        raise HTTPException(status_code=404, detail="Video not found")
    video_path = pipeline.video_path_for(session_id)
    if not os.path.exists(video_path):
        raise HTTPException(status_code=404, detail="Video not found")
    return FileResponse(video_path, media_type="video/mp4", filename="animation.mp4")


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
