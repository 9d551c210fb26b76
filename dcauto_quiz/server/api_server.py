"""FastAPI server that exposes the quiz session to a browser."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from dcauto_quiz.constants.about import APP_NAME, APP_VERSION
from dcauto_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from dcauto_quiz.constants.quiz_constants import LOW_TIME_WARNING_SECONDS
from dcauto_quiz.core.errors import ContractViolationError, EmptyPoolError
from dcauto_quiz.core.markdown_renderer import renderer
from dcauto_quiz.core.models import ALL_DOMAINS, DOMAINS
from dcauto_quiz.core.session_controller import QuizSessionController, SessionSnapshot
from dcauto_quiz.core.time_format import format_clock

_QUIZ_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>DCAUTO Quiz</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: ui-monospace, 'Cascadia Mono', monospace; background: #000; color: #fff; }
      body { margin: 0 auto; padding: 1rem; max-width: 42rem; display: flex; flex-direction: column; gap: 1rem; }
      header { display: flex; justify-content: space-between; align-items: flex-end; border-bottom: 1px solid #1f2937; padding-bottom: 1rem; }
      #timer { font-size: 2rem; font-weight: bold; }
      #timer.low { color: #ef4444; }
      .hidden { display: none !important; }
      .muted { color: #6b7280; font-size: 0.8rem; }
      select, button { font: inherit; }
      select { width: 100%; background: #111827; color: #fff; border: 1px solid #374151; padding: 0.75rem; }
      .primary { width: 100%; background: #fff; color: #000; font-weight: bold; border: none; padding: 1rem; cursor: pointer; }
      .exit { color: #ef4444; background: none; border: 1px solid #7f1d1d; font-size: 0.75rem; cursor: pointer; }
      .stats-bar { display: flex; justify-content: space-between; text-transform: uppercase; }
      .prompt { border-left: 2px solid #374151; background: rgba(17, 24, 39, 0.3); padding: 1rem; font-size: 1.15rem; line-height: 1.6; }
      .option { display: block; width: 100%; text-align: left; padding: 1rem; margin-bottom: 0.75rem; background: none; color: #fff; border: 1px solid #374151; cursor: pointer; }
      .option:disabled { cursor: default; }
      .option.correct { border-color: #22c55e; color: #22c55e; font-weight: bold; }
      .option.wrong { border-color: #ef4444; color: #ef4444; text-decoration: line-through; }
      .option.dimmed { border-color: #1f2937; color: #4b5563; }
      .summary-row { display: flex; justify-content: space-between; border-bottom: 1px solid #1f2937; padding: 0.5rem 0; }
      .good { color: #22c55e; }
      .bad { color: #ef4444; }
      #message { color: #facc15; min-height: 1.2rem; }
    </style>
  </head>
  <body>
    <header>
      <div>
        <strong>DCAUTO Quiz</strong>
        <button id=\"exit-button\" class=\"exit hidden\">[ EXIT ]</button>
        <div class=\"muted\">v1.2 Multiple Choice</div>
      </div>
      <div id=\"timer\">20:00</div>
    </header>
    <p id=\"message\"></p>

    <section id=\"setup\" class=\"hidden\">
      <label class=\"muted\" for=\"domain\">Select Domain</label>
      <select id=\"domain\"></select>
      <p></p>
      <button id=\"start-button\" class=\"primary\">START QUIZ</button>
      <p class=\"muted\" style=\"text-align:center\">4 Options | Instant Feedback | Adaptive Queue</p>
    </section>

    <section id=\"playing\" class=\"hidden\">
      <div class=\"stats-bar muted\">
        <span id=\"card-counter\"></span>
        <span class=\"good\" id=\"correct-count\"></span>
        <span class=\"bad\" id=\"wrong-count\"></span>
      </div>
      <div class=\"prompt\">
        <div class=\"muted\" id=\"domain-code\"></div>
        <div id=\"prompt-html\"></div>
      </div>
      <div id=\"options\"></div>
      <button id=\"next-button\" class=\"primary hidden\"></button>
      <p id=\"select-hint\" class=\"muted\" style=\"text-align:center\">Select an option to continue</p>
    </section>

    <section id=\"summary\" class=\"hidden\">
      <h2 style=\"text-align:center\">QUIZ COMPLETE</h2>
      <div class=\"summary-row\"><span class=\"muted\">Accuracy</span><span id=\"accuracy\"></span></div>
      <div class=\"summary-row\"><span class=\"muted\">Total Questions</span><span id=\"total\"></span></div>
      <div class=\"summary-row\"><span class=\"muted\">Correct</span><span class=\"good\" id=\"correct\"></span></div>
      <div class=\"summary-row\"><span class=\"muted\">Mistakes (Re-queued)</span><span class=\"bad\" id=\"mistakes\"></span></div>
      <p></p>
      <button id=\"new-quiz-button\" class=\"primary\">NEW QUIZ</button>
    </section>

    <script>
      const $ = (id) => document.getElementById(id);
      let renderedKey = null;

      async function call(method, path, body) {
        const response = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        const payload = await response.json().catch(() => ({}));
        $('message').textContent = response.ok ? '' : (payload.detail || 'Request failed.');
        return payload;
      }

      async function loadDomains() {
        const payload = await call('GET', '/domains');
        const select = $('domain');
        select.innerHTML = '';
        for (const entry of payload.domains) {
          const option = document.createElement('option');
          option.value = entry.value;
          option.textContent = `${entry.label} [${entry.count}]`;
          select.appendChild(option);
        }
      }

      function show(section) {
        for (const id of ['setup', 'playing', 'summary']) {
          $(id).classList.toggle('hidden', id !== section);
        }
        $('exit-button').classList.toggle('hidden', section !== 'playing');
      }

      function renderPlaying(state) {
        const card = state.card;
        $('card-counter').textContent = `Card ${state.card_number} / ${state.deck_length}`;
        $('correct-count').textContent = `Correct: ${state.stats.correct}`;
        $('wrong-count').textContent = `Wrong: ${state.stats.wrong}`;
        const key = `${card.id}|${state.card_number}`;
        if (key !== renderedKey) {
          renderedKey = key;
          $('domain-code').textContent = card.domain_code;
          $('prompt-html').innerHTML = card.prompt_html;
        }
        const container = $('options');
        container.innerHTML = '';
        state.options.forEach((text, idx) => {
          const button = document.createElement('button');
          button.className = 'option';
          button.textContent = `${String.fromCharCode(65 + idx)}. ${text}`;
          button.disabled = state.answered;
          if (state.answered) {
            if (text === state.correct_answer) button.classList.add('correct');
            else if (text === state.selected_option) button.classList.add('wrong');
            else button.classList.add('dimmed');
          }
          button.addEventListener('click', () => call('POST', '/answer', { option: text }).then(refresh));
          container.appendChild(button);
        });
        $('next-button').classList.toggle('hidden', !state.answered);
        $('select-hint').classList.toggle('hidden', state.answered);
        $('next-button').textContent = state.is_last_card ? 'FINISH EXAM' : 'NEXT QUESTION';
      }

      function renderSummary(stats) {
        $('accuracy').textContent = `${stats.accuracy}%`;
        $('accuracy').className = stats.passed ? 'good' : '';
        $('total').textContent = stats.total_answered;
        $('correct').textContent = stats.correct;
        $('mistakes').textContent = stats.wrong;
      }

      async function refresh() {
        const state = await call('GET', '/state');
        $('timer').textContent = state.timer;
        $('timer').classList.toggle('low', state.low_time);
        if (state.phase === 'PLAYING') {
          show('playing');
          renderPlaying(state);
        } else if (state.phase === 'SUMMARY') {
          show('summary');
          renderSummary(state.stats);
          renderedKey = null;
        } else {
          show('setup');
          renderedKey = null;
        }
      }

      $('start-button').addEventListener('click', () => call('POST', '/start', { domain: $('domain').value }).then(refresh));
      $('next-button').addEventListener('click', () => call('POST', '/next').then(refresh));
      $('exit-button').addEventListener('click', () => call('POST', '/exit').then(refresh));
      $('new-quiz-button').addEventListener('click', () => call('POST', '/reset').then(refresh));

      loadDomains().then(refresh);
      setInterval(refresh, 1000);
    </script>
  </body>
</html>
"""


class StartPayload(BaseModel):
    """Payload schema for starting a quiz."""

    domain: str = ALL_DOMAINS


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers."""

    option: str


def _get_controller_dependency(controller: QuizSessionController):
    def dependency() -> QuizSessionController:
        return controller

    return dependency


def serialize_snapshot(snapshot: SessionSnapshot) -> dict[str, object]:
    """Convert a snapshot to JSON; the correct answer is only revealed once answered."""
    stats = snapshot.stats.to_dict()
    stats["passed"] = snapshot.stats.passed()
    domain_filter = snapshot.domain_filter
    payload: dict[str, object] = {
        "phase": snapshot.phase.name,
        "domain_filter": getattr(domain_filter, "value", domain_filter),
        "timer_seconds_remaining": snapshot.timer_seconds_remaining,
        "timer": format_clock(snapshot.timer_seconds_remaining),
        "low_time": snapshot.timer_seconds_remaining < LOW_TIME_WARNING_SECONDS,
        "timer_running": snapshot.timer_running,
        "deck_length": snapshot.deck_length,
        "stats": stats,
        "card": None,
    }
    card = snapshot.current_card
    if card is not None:
        payload.update(
            {
                "card": {
                    "id": card.id,
                    "domain": card.domain.value,
                    "domain_code": card.domain_code,
                    "prompt": card.prompt,
                    "prompt_html": renderer.render_fragment(card.prompt),
                },
                "card_number": snapshot.card_number,
                "is_last_card": snapshot.is_last_card,
                "options": list(snapshot.current_options),
                "answered": snapshot.answered,
                "selected_option": snapshot.selected_option,
                "is_correct": snapshot.is_correct,
                "correct_answer": card.correct_answer if snapshot.answered else None,
            }
        )
    return payload


def create_api_app(controller: QuizSessionController) -> FastAPI:
    """Create a FastAPI application wired to the provided session controller."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    controller_dep = _get_controller_dependency(controller)

    @app.get("/", response_class=HTMLResponse)
    def serve_quiz_page() -> str:
        return _QUIZ_PAGE_HTML

    @app.get("/domains")
    def list_domains(session: QuizSessionController = Depends(controller_dep)) -> dict[str, object]:
        bank = session.get_question_bank()
        counts = bank.count_by_domain()
        entries: list[dict[str, object]] = [
            {"value": ALL_DOMAINS, "label": "ALL DOMAINS (Mixed)", "count": len(bank)}
        ]
        entries.extend(
            {"value": domain.value, "label": domain.value, "count": counts[domain]}
            for domain in DOMAINS
        )
        return {"domains": entries}

    @app.get("/state")
    def get_state(session: QuizSessionController = Depends(controller_dep)) -> dict[str, object]:
        return serialize_snapshot(session.get_snapshot())

    @app.post("/start", status_code=201)
    def start_game(
        payload: StartPayload,
        session: QuizSessionController = Depends(controller_dep),
    ) -> dict[str, object]:
        try:
            session.start_game(payload.domain)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except EmptyPoolError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except ContractViolationError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return serialize_snapshot(session.get_snapshot())

    @app.post("/answer")
    def submit_answer(
        payload: AnswerPayload,
        session: QuizSessionController = Depends(controller_dep),
    ) -> dict[str, object]:
        try:
            accepted = session.submit_answer(payload.option)
        except ContractViolationError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        state = serialize_snapshot(session.get_snapshot())
        state["accepted"] = accepted
        return state

    def _run(session: QuizSessionController, action) -> dict[str, object]:
        try:
            action()
        except ContractViolationError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return serialize_snapshot(session.get_snapshot())

    @app.post("/next")
    def advance(session: QuizSessionController = Depends(controller_dep)) -> dict[str, object]:
        return _run(session, session.advance)

    @app.post("/exit")
    def exit_quiz(session: QuizSessionController = Depends(controller_dep)) -> dict[str, object]:
        return _run(session, session.exit)

    @app.post("/reset")
    def reset_to_setup(session: QuizSessionController = Depends(controller_dep)) -> dict[str, object]:
        return _run(session, session.reset_to_setup)

    @app.post("/timer/pause")
    def pause_timer(session: QuizSessionController = Depends(controller_dep)) -> dict[str, object]:
        return _run(session, session.stop_timer)

    @app.post("/timer/resume")
    def resume_timer(session: QuizSessionController = Depends(controller_dep)) -> dict[str, object]:
        return _run(session, session.start_timer)

    return app


def start_api_server(
    controller: QuizSessionController,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(controller)
    # log_config=None: records go through configure_logging() handlers and levels.
    config = uvicorn.Config(app=app, host=host, port=port, log_config=None)
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    return thread
