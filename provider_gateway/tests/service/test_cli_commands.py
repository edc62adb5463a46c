from __future__ import annotations

import json

from provider_gateway.gateway import ProviderGateway
from provider_gateway.service.cli import main
from provider_gateway.service.cli.cli_actions import handle_analyze_cmd, handle_chat
from provider_gateway.service.cli.cli_parser import build_parser


def _last_json_line(text: str) -> dict:
    return json.loads(text.strip().splitlines()[-1])


def test_chat_dry_run_prints_endpoint_and_body(capsys):
    code = main(["chat", "--provider", "openai", "--model", "gpt-4o-mini", "--prompt", "hi", "--system", "be brief"])
    assert code == 0  # nosec B101
    plan = json.loads(capsys.readouterr().out)
    assert plan["endpoint"] == "https://api.openai.com/v1/chat/completions"  # nosec B101
    assert plan["api_key_present"] is False  # nosec B101
    assert plan["body"]["messages"] == [  # nosec B101
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hi"},
    ]


def test_chat_dry_run_redacts_gemini_key(capsys, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-secret")
    code = main(["chat", "--provider", "gemini", "--model", "gemini-1.5-flash", "--prompt", "hi"])
    assert code == 0  # nosec B101
    out = capsys.readouterr().out
    assert "AIza-secret" not in out  # nosec B101
    assert json.loads(out)["api_key_present"] is True  # nosec B101


def test_chat_dry_run_with_schema_file(capsys, tmp_path):
    schema_file = tmp_path / "schema.json"
    schema_file.write_text(json.dumps({"type": "object"}), encoding="utf-8")
    code = main(["chat", "--provider", "ollama", "--model", "llama3", "--prompt", "hi", "--json-schema", str(schema_file)])
    assert code == 0  # nosec B101
    body = json.loads(capsys.readouterr().out)["body"]
    assert body["format"] == {"type": "object"}  # nosec B101


def test_chat_unknown_provider_fails(capsys):
    code = main(["chat", "--provider", "anthropic", "--model", "m", "--prompt", "hi"])
    assert code == 1  # nosec B101
    err = _last_json_line(capsys.readouterr().err)
    assert err["code"] == "unsupported"  # nosec B101


def test_chat_execute_requires_complete_config(capsys):
    code = main(["chat", "--provider", "openai", "--model", "m", "--prompt", "hi", "--execute"])
    assert code == 1  # nosec B101
    assert _last_json_line(capsys.readouterr().err)["code"] == "config"  # nosec B101


def test_chat_execute_prints_normalized_reply(capsys, monkeypatch, http_recorder, fixed_clock):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
    http_recorder.payload = {"choices": [{"message": {"content": "pong"}, "finish_reason": "stop"}]}
    gw = ProviderGateway(transport=http_recorder.transport(), clock=fixed_clock)
    args = build_parser().parse_args(["chat", "--provider", "openai", "--model", "m", "--prompt", "ping", "--execute"])
    assert handle_chat(args, gateway=gw) == 0  # nosec B101
    assert json.loads(capsys.readouterr().out)["message"]["content"] == "pong"  # nosec B101
    assert len(http_recorder.requests) == 1  # nosec B101


def test_analyze_dry_run(capsys, monkeypatch):
    monkeypatch.setenv("GATEWAY_MODEL", "llama3")
    code = main(["analyze", "--text", "Hiring now!"])
    assert code == 0  # nosec B101
    plan = json.loads(capsys.readouterr().out)
    assert plan["provider"] == "ollama"  # nosec B101
    assert plan["body"]["messages"][1] == {"role": "user", "content": "Hiring now!"}  # nosec B101
    assert plan["body"]["stream"] is False  # nosec B101


def test_analyze_execute_reports_errors(capsys, monkeypatch, http_recorder, fixed_clock):
    monkeypatch.setenv("GATEWAY_MODEL", "llama3")
    monkeypatch.setenv("OLLAMA_API_KEY", "local")
    http_recorder.payload = {"message": {"content": "no json here"}}
    gw = ProviderGateway(transport=http_recorder.transport(), clock=fixed_clock)
    args = build_parser().parse_args(["analyze", "--text", "post", "--execute"])
    assert handle_analyze_cmd(args, gateway=gw) == 1  # nosec B101
    assert "error" in _last_json_line(capsys.readouterr().err)  # nosec B101
