from __future__ import annotations

from types import SimpleNamespace

import pytest

from shorts_architect.blueprint_engine.engine import parse_blueprint
from shorts_architect.blueprint_engine.llm import ClaudeLLM, EchoLLM, OpenAILLM
from shorts_architect.blueprint_engine.prompts import SYSTEM_PROMPT
from shorts_architect.config import SynthesizerConfig
from shorts_architect.errors import ConfigurationError


class RecordingEndpoint:
    def __init__(self, response) -> None:
        self.response = response
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.response


def test_openai_client_sends_system_and_user_messages():
    endpoint = RecordingEndpoint(SimpleNamespace(output_text='{"ok": true}', status="completed"))
    llm = OpenAILLM(client=SimpleNamespace(responses=endpoint), model="gpt-4.1-mini")

    text = llm.complete("Brief: ...", system="persona", max_output_tokens=1400, temperature=0.9)

    assert text == '{"ok": true}'
    params = endpoint.calls[0]
    assert params["model"] == "gpt-4.1-mini"
    assert params["max_output_tokens"] == 1400
    assert params["temperature"] == 0.9
    assert params["input"][0] == {"role": "system", "content": [{"type": "input_text", "text": "persona"}]}
    assert params["input"][1]["content"][0]["text"] == "Brief: ..."


def test_openai_client_returns_empty_string_without_output():
    endpoint = RecordingEndpoint(SimpleNamespace(output_text=None, status="incomplete"))
    llm = OpenAILLM(client=SimpleNamespace(responses=endpoint), model="gpt-4.1-mini")
    assert llm.complete("Brief") == ""


def test_claude_client_collects_text_blocks():
    response = SimpleNamespace(
        stop_reason="end_turn",
        content=[
            SimpleNamespace(type="text", text='{"a": '),
            SimpleNamespace(type="tool_use", text="ignored"),
            SimpleNamespace(type="text", text="1}"),
        ],
    )
    endpoint = RecordingEndpoint(response)
    llm = ClaudeLLM(client=SimpleNamespace(messages=endpoint), model="claude-sonnet-4-5")

    text = llm.complete("Brief", system="persona", max_output_tokens=900, temperature=0.5)

    assert text == '{"a": 1}'
    params = endpoint.calls[0]
    assert params["system"] == "persona"
    assert params["max_tokens"] == 900
    assert params["temperature"] == 0.5


def test_claude_client_uses_configured_budget_and_system_prompt():
    endpoint = RecordingEndpoint(SimpleNamespace(stop_reason="end_turn", content=[]))
    llm = ClaudeLLM(
        client=SimpleNamespace(messages=endpoint),
        model="claude-sonnet-4-5",
        system_prompt="persona",
        max_output_tokens=1400,
    )

    assert llm.complete("Brief") == ""
    params = endpoint.calls[0]
    assert params["system"] == "persona"
    assert params["max_tokens"] == 1400
    assert params["temperature"] == 0.9
    assert params["messages"] == [{"role": "user", "content": [{"type": "text", "text": "Brief"}]}]
    assert "max_output_tokens" not in params


@pytest.mark.parametrize("budget_key", ["max_output_tokens", "max_tokens"])
def test_both_providers_accept_either_budget_spelling(budget_key):
    openai_endpoint = RecordingEndpoint(SimpleNamespace(output_text="{}", status="completed"))
    claude_endpoint = RecordingEndpoint(SimpleNamespace(stop_reason="end_turn", content=[]))

    OpenAILLM(client=SimpleNamespace(responses=openai_endpoint), model="m").complete("Brief", **{budget_key: 700})
    ClaudeLLM(client=SimpleNamespace(messages=claude_endpoint), model="m").complete("Brief", **{budget_key: 700})

    assert openai_endpoint.calls[0]["max_output_tokens"] == 700
    assert "max_tokens" not in openai_endpoint.calls[0]
    assert claude_endpoint.calls[0]["max_tokens"] == 700
    assert "max_output_tokens" not in claude_endpoint.calls[0]


def test_echo_output_is_a_valid_blueprint():
    blueprint = parse_blueprint(EchoLLM().complete("anything"))
    assert len(blueprint.hashtags) == 6


def test_build_llm_requires_credential():
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY is not configured"):
        SynthesizerConfig().build_llm()


def test_build_llm_uses_configured_provider(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    llm = SynthesizerConfig().build_llm()
    assert isinstance(llm, OpenAILLM)
    assert llm.system_prompt == SYSTEM_PROMPT
    assert llm.max_output_tokens == 1400
    assert llm.temperature == 0.9

    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
    claude = SynthesizerConfig(llm_provider="claude", llm_model="claude-sonnet-4-5").build_llm()
    assert isinstance(claude, ClaudeLLM)
    assert claude.system_prompt == SYSTEM_PROMPT
    assert claude.max_output_tokens == 1400

    assert isinstance(SynthesizerConfig(llm_provider="echo").build_llm(), EchoLLM)


def test_unknown_provider_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="Unknown llm_provider"):
        SynthesizerConfig(llm_provider="mystery").build_llm()


def test_config_loads_json_and_yaml(tmp_path):
    json_path = tmp_path / "synth.json"
    json_path.write_text('{"llm_model": "gpt-4.1", "temperature": 0.7}', encoding="utf-8")
    yaml_path = tmp_path / "synth.yaml"
    yaml_path.write_text("llm_provider: echo\nmax_output_tokens: 800\n", encoding="utf-8")

    from_json = SynthesizerConfig.from_file(json_path)
    from_yaml = SynthesizerConfig.from_file(yaml_path)

    assert from_json.llm_model == "gpt-4.1"
    assert from_json.temperature == 0.7
    assert from_yaml.llm_provider == "echo"
    assert from_yaml.max_output_tokens == 800
