"""Deep links that open a rendered prompt in external AI chat tools."""

from typing import Dict, Mapping, Optional
from urllib.parse import quote, quote_plus

from template_engine import substitute

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"

CHATGPT_URL = "https://chatgpt.com/"
CLAUDE_URL = "https://claude.ai/new"
GEMINI_URL = "https://gemini.google.com/app"
GROK_URL = "https://grok.com/"
OPENROUTER_URL = "https://openrouter.ai/playground"


def encode_uri_component(text: str) -> str:
    """Percent-encode text the way browsers encode a URI component."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def generate_chatgpt_link(prompt: str, variables: Optional[Mapping[str, str]] = None) -> str:
    """ChatGPT prefers '+' for spaces in the q parameter."""
    final_prompt = substitute(prompt, variables or {})
    return f"{CHATGPT_URL}?q={quote_plus(final_prompt, safe=_URI_COMPONENT_SAFE)}"


def generate_claude_link(prompt: str, variables: Optional[Mapping[str, str]] = None) -> str:
    final_prompt = substitute(prompt, variables or {})
    return f"{CLAUDE_URL}?q={encode_uri_component(final_prompt)}"


def generate_gemini_link(prompt: str, variables: Optional[Mapping[str, str]] = None) -> str:
    """Gemini has no prefill parameter; the client copies the prompt to the clipboard first."""
    return GEMINI_URL


def generate_grok_link(prompt: str, variables: Optional[Mapping[str, str]] = None) -> str:
    final_prompt = substitute(prompt, variables or {})
    return f"{GROK_URL}?q={encode_uri_component(final_prompt)}"


def generate_openrouter_link(prompt: str, variables: Optional[Mapping[str, str]] = None) -> str:
    final_prompt = substitute(prompt, variables or {})
    return f"{OPENROUTER_URL}?prompt={encode_uri_component(final_prompt)}"


def generate_deep_links(prompt: str, variables: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Build every supported deep link for a prompt.

    Args:
        prompt: Prompt template text
        variables: Placeholder bindings to substitute before encoding

    Returns:
        Dict of tool name -> URL
    """
    return {
        "chatgpt": generate_chatgpt_link(prompt, variables),
        "claude": generate_claude_link(prompt, variables),
        "gemini": generate_gemini_link(prompt, variables),
        "grok": generate_grok_link(prompt, variables),
        "openrouter": generate_openrouter_link(prompt, variables),
    }
