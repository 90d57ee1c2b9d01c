"""
HTTP API
========

Flask application exposing the pipeline:

    POST /analyze     {channelUrl}            -> {channelTitle, videosAnalyzed, styleGuide, characteristics}
    POST /generate    {styleAnalysis, topic}  -> {script}
    GET  /transcript?videoId=<id>             -> {transcript}
    GET  /health                              -> {status}

Errors are returned as {"error": message} with the matching status code.
"""

import logging
from typing import Optional

from flask import Flask, current_app, jsonify, request
from flask_cors import CORS

from .aggregator import TranscriptSource
from .config import Settings
from .errors import ScriptStyleError, ValidationError
from .pipeline import StylePipeline
from .transcript_fetcher import TranscriptFetcher

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    pipeline: Optional[StylePipeline] = None,
    transcript_source: Optional[TranscriptSource] = None,
) -> Flask:
    """
    Build the Flask app.

    The pipeline is created on first use so that /transcript and /health
    work without API keys configured.
    """
    app = Flask(__name__)
    CORS(app)

    app.extensions["scriptstyle"] = {
        "settings": settings,
        "pipeline": pipeline,
        "transcripts": transcript_source,
    }

    def _state() -> dict:
        return current_app.extensions["scriptstyle"]

    def _settings() -> Settings:
        state = _state()
        if state["settings"] is None:
            state["settings"] = Settings.from_env()
        return state["settings"]

    def _pipeline() -> StylePipeline:
        state = _state()
        if state["pipeline"] is None:
            state["pipeline"] = StylePipeline.from_settings(_settings())
        return state["pipeline"]

    def _transcripts() -> TranscriptSource:
        # Always in-process: this endpoint is what TRANSCRIPT_BASE_URL points at
        state = _state()
        if state["transcripts"] is None:
            state["transcripts"] = TranscriptFetcher(languages=_settings().transcript_languages)
        return state["transcripts"]

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.errorhandler(ScriptStyleError)
    def handle_pipeline_error(e: ScriptStyleError):
        if e.status_code >= 500:
            logger.error(f"{request.path} failed: {e.message}")
        return jsonify({"error": e.message}), e.status_code

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/analyze", methods=["POST"])
    def analyze():
        data = _json_body()
        channel_url = data.get("channelUrl")
        if not isinstance(channel_url, str) or not channel_url.strip():
            raise ValidationError("Channel URL is required")

        try:
            analysis = _pipeline().analyze_channel(channel_url)
        except ScriptStyleError:
            raise
        except Exception as e:
            logger.exception("Error analyzing channel")
            return jsonify({"error": str(e) or "An error occurred while analyzing the channel"}), 500

        return jsonify(analysis.model_dump(by_alias=True))

    @app.route("/generate", methods=["POST"])
    def generate():
        data = _json_body()
        style_analysis = data.get("styleAnalysis")
        topic = data.get("topic")
        if not isinstance(style_analysis, str) or not style_analysis.strip() \
                or not isinstance(topic, str) or not topic.strip():
            raise ValidationError("Style analysis and topic are required")

        try:
            script = _pipeline().generate_script(style_analysis, topic)
        except ScriptStyleError:
            raise
        except Exception as e:
            logger.exception("Error generating script")
            return jsonify({"error": str(e) or "An error occurred while generating the script"}), 500

        return jsonify({"script": script})

    @app.route("/transcript", methods=["GET"])
    def transcript():
        video_id = (request.args.get("videoId") or "").strip()
        if not video_id:
            raise ValidationError("Video ID is required")

        try:
            text = _transcripts().fetch_transcript(video_id)
        except ScriptStyleError:
            raise
        except Exception:
            logger.exception(f"Error fetching transcript for {video_id}")
            return jsonify({"error": "Could not fetch transcript for this video"}), 404

        return jsonify({"transcript": text})

    return app
