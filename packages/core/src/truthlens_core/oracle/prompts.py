from __future__ import annotations

SYSTEM_PROMPT = (
    "You are an AI content authenticity analyzer. "
    "Always respond with valid JSON only, no markdown formatting."
)
VIDEO_SYSTEM_PROMPT = (
    "You are an AI video authenticity analyzer. "
    "Always respond with valid JSON only, no markdown formatting."
)


def _response_format(detail_labels: tuple[str, ...], explanation_hint: str = "") -> str:
    hint = explanation_hint or "Brief explanation of your analysis"
    details = ",\n".join(
        f'    {{ "label": "{label}", "value": "Finding", "type": "positive|negative|neutral" }}'
        for label in detail_labels
    )
    return (
        "Respond in JSON format:\n"
        "{\n"
        '  "verdict": "authentic" | "suspicious" | "fake",\n'
        '  "confidence": 0-100,\n'
        f'  "explanation": "{hint}",\n'
        '  "details": [\n'
        f"{details}\n"
        "  ],\n"
        '  "flags": ["List of specific issues found, if any"]\n'
        "}"
    )


def _numbered(items: tuple[str, ...]) -> str:
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))


def text_prompt(text: str) -> str:
    checks = (
        "Factual accuracy and verifiability",
        "Signs of AI-generated content (repetitive patterns, unnatural phrasing)",
        "Emotional manipulation or sensationalism",
        "Logical fallacies or misleading claims",
        "Source credibility indicators",
    )
    return (
        "You are an expert misinformation and AI-generated content detector. "
        f"Analyze this text for:\n{_numbered(checks)}\n\n"
        f'Text to analyze:\n"""\n{text}\n"""\n\n'
        f"{_response_format(('Category',))}"
    )


def url_prompt(url: str, domain: str) -> str:
    checks = (
        "Domain reputation (is it a known news source, academic institution, or suspicious domain?)",
        "URL structure (look for typosquatting, suspicious subdomains, or misleading paths)",
        "Common phishing indicators",
        "Content credibility based on the URL pattern",
    )
    return (
        "You are a cybersecurity and misinformation expert. "
        "Analyze this URL for credibility:\n\n"
        f"URL: {url}\nDomain: {domain}\n\n"
        f"Evaluate:\n{_numbered(checks)}\n\n"
        "Note: Well-known domains like bbc.com, nytimes.com, reuters.com, .gov, .edu "
        "are typically credible.\n"
        "Suspicious patterns: unusual TLDs, misspelled domains, excessive subdomains, "
        "URL shorteners.\n\n"
        f"{_response_format(('Domain Age', 'Domain Reputation', 'URL Structure'))}"
    )


def image_prompt() -> str:
    checks = (
        "Signs of AI generation (artifacts, inconsistent lighting, unnatural textures, distorted features)",
        "Digital manipulation (splicing, cloning, face-swapping, airbrushing)",
        "Metadata inconsistencies",
        "Contextual authenticity (does the scene look realistic?)",
        "Deepfake indicators in faces (asymmetry, blending artifacts, unnatural expressions)",
    )
    return (
        "You are an expert in detecting manipulated and AI-generated images. "
        f"Analyze this image for:\n\n{_numbered(checks)}\n\n"
        "IMPORTANT:\n"
        "- Illustrations, artwork, graphics, and cartoons are NOT fake - they are artistic content\n"
        '- "Fake" means content designed to deceive (deepfakes, manipulated photos, AI trying to look real)\n'
        "- Natural photos with normal photography artifacts are authentic\n"
        "- Stock photos and professional photography are authentic\n\n"
        f"{_response_format(('AI Generation', 'Manipulation', 'Visual Consistency'))}"
    )


def video_prompt(frame_count: int) -> str:
    checks = (
        "Deepfake indicators (face inconsistencies, blending artifacts, unnatural movements)",
        "Frame-to-frame consistency (lighting, shadows, perspective)",
        "Signs of video manipulation (splicing, speed changes, added elements)",
        "Audio-visual sync issues (if applicable)",
        "AI-generated content markers",
    )
    return (
        "You are an expert in detecting deepfake videos and manipulated video content.\n"
        f"Analyze these {frame_count} frames extracted from a video for:\n\n"
        f"{_numbered(checks)}\n\n"
        "IMPORTANT:\n"
        "- Animation, CGI movies, and artistic videos are NOT fake\n"
        '- "Fake" means deceptive content (deepfakes, manipulated footage presented as real)\n'
        "- News footage, documentaries, and authentic recordings are authentic\n\n"
        "Analyze all frames together for temporal consistency.\n\n"
        f"{_response_format(('Deepfake Detection', 'Temporal Consistency', 'Visual Artifacts'))}"
    )


def document_prompt(file_name: str, mime_type: str) -> str:
    checks = (
        "Document structure and formatting consistency",
        "Signs of tampering or editing (font inconsistencies, alignment issues)",
        "Content credibility and factual accuracy",
        "Metadata authenticity indicators",
        "Digital signature verification (if applicable)",
        "Language and style consistency",
    )
    return (
        "You are an expert in document authenticity and forgery detection. "
        "Analyze this document for:\n\n"
        f"Document: {file_name}\nType: {mime_type}\n\n"
        f"Evaluate:\n{_numbered(checks)}\n\n"
        "Common document fraud indicators:\n"
        "- Inconsistent fonts or formatting\n"
        "- Misaligned text or elements\n"
        "- Unusual document structure\n"
        "- Grammar/spelling issues in official documents\n"
        "- Missing or inconsistent headers/footers\n\n"
        f"{_response_format(('Document Structure', 'Content Integrity', 'Formatting Consistency'))}"
    )


def audio_prompt(file_name: str, mime_type: str) -> str:
    checks = (
        "Voice synthesis/cloning indicators (unnatural prosody, mechanical artifacts)",
        "Audio splicing and editing (abrupt cuts, inconsistent background noise)",
        "AI-generated speech markers (unusual pauses, robotic qualities)",
        "Background audio consistency",
        "Compression artifacts and quality anomalies",
        "Emotional authenticity in speech patterns",
    )
    return (
        "You are an expert in audio forensics and deepfake audio detection. "
        "Analyze audio content for:\n\n"
        f"Audio File: {file_name}\nType: {mime_type}\n\n"
        f"Evaluate:\n{_numbered(checks)}\n\n"
        "Deepfake audio indicators:\n"
        "- Unnatural breathing patterns\n"
        "- Inconsistent room acoustics\n"
        "- Metallic or synthetic voice qualities\n"
        "- Unusual word pronunciations\n"
        "- Missing micro-expressions in speech\n\n"
        "Note: Since you cannot directly play audio, analyze based on the audio file "
        "metadata and characteristics that can be inferred from the encoded data patterns.\n\n"
        + _response_format(
            ("Voice Synthesis", "Audio Quality", "Background Consistency"),
            "Brief explanation of your analysis based on available audio characteristics",
        )
    )
