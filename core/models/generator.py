from __future__ import annotations
import os
import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv

from core.errors import UpstreamError, ValidationError

load_dotenv()

logger = logging.getLogger(__name__)
if not logger.handlers:
    logging.basicConfig(level=logging.INFO)

# Fixed upstream settings
LLM_MODEL = "gpt-4.1-mini"
MAX_TOKENS = 4096

DEFAULT_TONE = "professional"
DEFAULT_LENGTH = "medium"
TONES = ("professional", "casual", "academic", "conversational", "technical")

LENGTH_GUIDES = {
    "short": "500-700 words",
    "medium": "1000-1200 words",
    "long": "2000-2500 words",
}
WORD_COUNTS = {
    "short": 500,
    "medium": 1000,
    "long": 2000,
}

# Lazy LLM init, keyed by (api_key, base_url)
_LLM = None
_LLM_KEY = None
_LLM_LOCK = threading.Lock()


def get_llm():
    global _LLM, _LLM_KEY
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key:
        return None
    base_url = os.getenv("OPENAI_BASE_URL") or None
    with _LLM_LOCK:
        if _LLM is not None and _LLM_KEY == (api_key, base_url):
            return _LLM
        from langchain_openai import ChatOpenAI
        _LLM = ChatOpenAI(
            api_key=api_key,
            base_url=base_url,
            model=LLM_MODEL,
            max_tokens=MAX_TOKENS,
            max_retries=0,
        )
        _LLM_KEY = (api_key, base_url)
        logger.info("[generator] LLM enabled: %s", LLM_MODEL)
        return _LLM


def generation_mode() -> str:
    return "llm" if (os.getenv("OPENAI_API_KEY") or "").strip() else "mock"


# Request normalization

def _split_keywords(raw) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        items = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = [str(k) for k in raw if k is not None]
    else:
        raise ValidationError("Keywords must be a list of strings or a comma-separated string")
    return [k.strip() for k in items if k.strip()]


@dataclass(frozen=True)
class GenerationRequest:
    topic: str
    tone: str = DEFAULT_TONE
    length: str = DEFAULT_LENGTH
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload) -> "GenerationRequest":
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        topic = payload.get("topic")
        if topic is not None and not isinstance(topic, str):
            raise ValidationError("Topic must be a string")
        topic = (topic or "").strip()
        if not topic:
            raise ValidationError("Topic is required")
        tone = str(payload.get("tone") or "").strip().lower() or DEFAULT_TONE
        length = str(payload.get("length") or "").strip().lower() or DEFAULT_LENGTH
        return cls(topic=topic, tone=tone, length=length, keywords=_split_keywords(payload.get("keywords")))

    @property
    def length_guide(self) -> str:
        return LENGTH_GUIDES.get(self.length, LENGTH_GUIDES[DEFAULT_LENGTH])

    @property
    def word_count(self) -> int:
        return WORD_COUNTS.get(self.length, WORD_COUNTS[DEFAULT_LENGTH])


# Prompt

def build_prompt(req: GenerationRequest) -> str:
    keyword_text = ""
    if req.keywords:
        keyword_text = f"\n\nIncorporate these keywords naturally: {', '.join(req.keywords)}"
    return (
        f'Write a comprehensive blog post on the following topic: "{req.topic}"\n\n'
        "Guidelines:\n"
        f"- Tone: {req.tone}\n"
        f"- Target length: {req.length_guide}\n"
        "- Create an engaging title\n"
        "- Include an introduction that hooks the reader\n"
        "- Use clear headings and subheadings (H2 and H3)\n"
        "- Provide valuable insights and practical information\n"
        "- Include examples where appropriate\n"
        "- End with a strong conclusion\n"
        f"- Use markdown formatting{keyword_text}\n\n"
        "Write the blog post now, starting with the title on the first line (without markdown heading):\n"
    )


# Mock generator: deterministic template used when no credential is configured

def _extra_sections(topic: str) -> str:
    return (
        "## Additional Resources\n\n"
        f"To further your understanding of {topic}, consider exploring:\n\n"
        "- Industry publications and journals\n"
        "- Online courses and certifications\n"
        "- Community forums and discussion groups\n"
        "- Case studies and white papers\n"
        "- Conferences and networking events\n\n"
        "## Frequently Asked Questions\n\n"
        "**Q: How long does it take to see results?**\n"
        "A: Results vary depending on your specific situation, but many see initial benefits "
        "within the first few weeks of implementation.\n\n"
        "**Q: Is this suitable for beginners?**\n"
        f"A: Absolutely! While there is a learning curve, the principles of {topic} can be "
        "understood and applied by people at all skill levels.\n\n"
        "**Q: What resources do I need to get started?**\n"
        "A: The basic requirements are minimal. Start with research and education, then "
        "gradually invest in tools and resources as needed."
    )


def generate_mock_document(req: GenerationRequest) -> Dict:
    topic = req.topic
    keyword_text = f"This post explores {', '.join(req.keywords)} and more." if req.keywords else ""

    sections = [
        "## Introduction",
        f"Welcome to this {req.tone} exploration of {topic}. {keyword_text}".rstrip(),
        f"In today's rapidly evolving landscape, understanding {topic} has become increasingly "
        "important. This comprehensive guide will walk you through the key concepts, practical "
        "applications, and future implications of this fascinating subject.",
        f"## What is {topic}?",
        f"{topic} represents a significant development in our modern world. It encompasses various "
        "aspects that affect how we work, live, and interact with technology and each other.",
        f"The fundamentals of {topic} can be broken down into several key components:",
        f"- **Core Principles**: The underlying concepts that make {topic} work\n"
        "- **Practical Applications**: Real-world use cases and implementations\n"
        f"- **Benefits**: How {topic} improves existing processes or creates new opportunities\n"
        "- **Challenges**: Current limitations and areas for improvement",
        "## Key Benefits",
        f"Understanding {topic} offers numerous advantages:",
        "1. **Enhanced Efficiency**: Streamlines processes and reduces manual effort\n"
        "2. **Cost Savings**: Optimizes resource allocation and reduces waste\n"
        "3. **Innovation**: Opens up new possibilities and creative solutions\n"
        "4. **Competitive Advantage**: Helps organizations stay ahead in their field",
        "## Best Practices",
        f"When implementing {topic}, consider these proven strategies:",
        "### Planning Phase\n"
        "Start with a clear vision and well-defined goals. Research existing solutions and "
        "identify gaps that need to be addressed.",
        "### Implementation\n"
        "Take an iterative approach, starting small and scaling gradually. Monitor progress "
        "closely and adjust based on feedback.",
        "### Optimization\n"
        "Continuously refine your approach based on data and results. Stay updated with the "
        "latest developments and innovations in the field.",
        "## Common Challenges",
        f"While {topic} offers many benefits, it's important to be aware of potential obstacles:",
        "- **Learning Curve**: Initial adoption may require training and adjustment\n"
        "- **Resource Requirements**: Implementation often needs investment in time and resources\n"
        "- **Integration**: Connecting with existing systems can be complex\n"
        "- **Change Management**: Organizational resistance to new approaches",
        "## Future Outlook",
        f"The future of {topic} looks promising, with ongoing developments in related technologies "
        "and methodologies. Experts predict continued growth and evolution, making now an ideal "
        "time to get involved.",
        "## Conclusion",
        f"{topic} represents an important area of focus in our modern world. By understanding its "
        "principles, benefits, and best practices, you can leverage it effectively for your needs.",
        "Whether you're just starting out or looking to deepen your expertise, the key is to stay "
        "curious, keep learning, and apply these concepts in practical ways. The journey of "
        f"mastering {topic} is ongoing, but the rewards are well worth the effort.",
    ]
    if req.word_count > 1000:
        sections.append(_extra_sections(topic))

    return {
        "title": f"{topic}: A Comprehensive Guide",
        "content": "\n\n".join(sections).strip(),
    }


# LLM generator

def _extract_text(resp) -> str:
    """Extract plain text from a LangChain message response across types."""
    content = getattr(resp, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # LangChain can return a list of content parts; join text segments
        parts = []
        for part in content:
            if isinstance(part, dict) and part.get("type") == "text":
                parts.append(str(part.get("text", "")))
            elif isinstance(part, str):
                parts.append(part)
        return "".join(parts)
    return "" if resp is None else str(resp)


_TITLE_MARKUP = re.compile(r"^\s*#+\s*")


def _clean_title(line: str) -> str:
    t = _TITLE_MARKUP.sub("", line).strip()
    for wrap in ("**", "__", '"', "'"):
        if len(t) > 2 * len(wrap) and t.startswith(wrap) and t.endswith(wrap):
            t = t[len(wrap):-len(wrap)].strip()
    return t


def parse_generated_text(text: str, fallback_title: str = "Untitled") -> Dict:
    """First line is the title (heading markup stripped); the rest is the body."""
    t = (text or "").lstrip("\r\n \t")
    first, _, rest = t.partition("\n")
    title = _clean_title(first) or fallback_title
    return {"title": title, "content": rest.strip()}


def generate_llm_document(req: GenerationRequest, llm) -> Dict:
    from langchain_core.messages import HumanMessage

    prompt = build_prompt(req)
    try:
        resp = llm.invoke([HumanMessage(content=prompt)])
    except Exception as e:
        logger.warning("[generator] upstream call failed: %s", e)
        raise UpstreamError(str(e) or "Failed to generate blog post") from e

    text = _extract_text(resp)
    if not text.strip():
        raise UpstreamError("Upstream API returned no content")
    return parse_generated_text(text, fallback_title=req.topic)


# Router

def generate_document(payload) -> Dict:
    req = GenerationRequest.from_payload(payload)
    llm = get_llm()
    if llm is None:
        logger.info("[generator] OPENAI_API_KEY not set; using mock generator for topic=%r", req.topic)
        return generate_mock_document(req)
    return generate_llm_document(req, llm)
