"""
User-facing use cases and their mapping to catalog capability tags
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)


class UseCase(str, Enum):
    """Tasks a user can ask for"""
    # Multimodal
    AUDIO_TEXT_TO_TEXT = "Audio-Text-to-Text"
    IMAGE_TEXT_TO_TEXT = "Image-Text-to-Text"
    VISUAL_QUESTION_ANSWERING = "Visual Question Answering"
    DOCUMENT_QUESTION_ANSWERING = "Document Question Answering"
    VIDEO_TEXT_TO_TEXT = "Video-Text-to-Text"
    VISUAL_DOCUMENT_RETRIEVAL = "Visual Document Retrieval"
    ANY_TO_ANY = "Any-to-Any"

    # Computer vision
    DEPTH_ESTIMATION = "Depth Estimation"
    IMAGE_CLASSIFICATION = "Image Classification"
    OBJECT_DETECTION = "Object Detection"
    IMAGE_SEGMENTATION = "Image Segmentation"
    TEXT_TO_IMAGE = "Text-to-Image"
    IMAGE_TO_TEXT = "Image-to-Text"
    IMAGE_TO_IMAGE = "Image-to-Image"
    IMAGE_TO_VIDEO = "Image-to-Video"
    UNCONDITIONAL_IMAGE_GEN = "Unconditional Image Generation"
    VIDEO_CLASSIFICATION = "Video Classification"
    TEXT_TO_VIDEO = "Text-to-Video"
    ZERO_SHOT_IMAGE_CLASSIFICATION = "Zero-Shot Image Classification"
    MASK_GENERATION = "Mask Generation"
    ZERO_SHOT_OBJECT_DETECTION = "Zero-Shot Object Detection"
    TEXT_TO_3D = "Text-to-3D"
    IMAGE_TO_3D = "Image-to-3D"
    THREE_D_MODELING = "3D Modeling"
    IMAGE_FEATURE_EXTRACTION = "Image Feature Extraction"
    KEYPOINT_DETECTION = "Keypoint Detection"
    VIDEO_TO_VIDEO = "Video-to-Video"

    # NLP
    TEXT_CLASSIFICATION = "Text Classification"
    TOKEN_CLASSIFICATION = "Token Classification"
    TABLE_QUESTION_ANSWERING = "Table Question Answering"
    QUESTION_ANSWERING = "Question Answering"
    ZERO_SHOT_CLASSIFICATION = "Zero-Shot Classification"
    TRANSLATION = "Translation"
    SUMMARIZATION = "Summarization"
    FEATURE_EXTRACTION = "Feature Extraction"
    TEXT_GENERATION = "Text Generation"
    FILL_MASK = "Fill-Mask"
    SENTENCE_SIMILARITY = "Sentence Similarity"
    TEXT_RANKING = "Text Ranking"

    # Audio
    TEXT_TO_SPEECH = "Text-to-Speech"
    TEXT_TO_AUDIO = "Text-to-Audio"
    AUTOMATIC_SPEECH_RECOGNITION = "Automatic Speech Recognition"
    AUDIO_TO_AUDIO = "Audio-to-Audio"
    AUDIO_CLASSIFICATION = "Audio Classification"
    VOICE_ACTIVITY_DETECTION = "Voice Activity Detection"

    # Tabular
    TABULAR_CLASSIFICATION = "Tabular Classification"
    TABULAR_REGRESSION = "Tabular Regression"
    TIME_SERIES_FORECASTING = "Time Series Forecasting"

    # Reinforcement learning
    REINFORCEMENT_LEARNING = "Reinforcement Learning"
    ROBOTICS = "Robotics"

    # Other
    GRAPH_MACHINE_LEARNING = "Graph Machine Learning"

    # Science
    SCIENCE = "Science"
    PHYSICS = "Physics"
    CHEMISTRY = "Chemistry"
    BIOLOGY = "Biology"
    MEDICINE = "Medicine"
    PROTEIN_BIOLOGY = "Protein Biology"
    GENOMICS = "Genomics"
    ENVIRONMENTAL_SCIENCE = "Environmental Science"
    MATHEMATICS = "Mathematics"
    ASTRONOMY = "Astronomy"


# Prompt-helper capabilities get extra handling in filtering and scoring
TEXT_TO_VIDEO_TAG = "text-to-video"
TEXT_TO_IMAGE_TAG = "text-to-image"

TASK_MAPPING: Dict[UseCase, Tuple[str, ...]] = {
    # Multimodal
    UseCase.AUDIO_TEXT_TO_TEXT: ("audio", "chat", "asr"),
    UseCase.IMAGE_TEXT_TO_TEXT: ("vision", "ocr"),
    UseCase.VISUAL_QUESTION_ANSWERING: ("vision", "qa", "chat"),
    UseCase.DOCUMENT_QUESTION_ANSWERING: ("ocr", "qa", "vision"),
    UseCase.VIDEO_TEXT_TO_TEXT: ("vision", "video-analysis"),
    UseCase.VISUAL_DOCUMENT_RETRIEVAL: ("ocr", "vision"),
    UseCase.ANY_TO_ANY: ("multimodal", "vision", "audio"),

    # Science
    UseCase.SCIENCE: ("science", "research", "reasoning"),
    UseCase.PHYSICS: ("physics", "science", "research"),
    UseCase.CHEMISTRY: ("chemistry", "science", "research"),
    UseCase.BIOLOGY: ("biology", "medicine", "science"),
    UseCase.PROTEIN_BIOLOGY: ("protein", "biology", "science"),
    UseCase.MEDICINE: ("medicine", "biology", "science"),
    UseCase.GENOMICS: ("genomics", "biology", "science"),
    UseCase.ENVIRONMENTAL_SCIENCE: ("environmental-science", "research"),
    UseCase.MATHEMATICS: ("math", "reasoning", "formula"),
    UseCase.ASTRONOMY: ("science", "physics", "research"),

    # Computer vision
    UseCase.DEPTH_ESTIMATION: ("vision",),
    UseCase.IMAGE_CLASSIFICATION: ("vision",),
    UseCase.OBJECT_DETECTION: ("vision", "object-detection"),
    UseCase.IMAGE_SEGMENTATION: ("vision",),
    UseCase.TEXT_TO_IMAGE: (TEXT_TO_IMAGE_TAG,),
    UseCase.IMAGE_TO_TEXT: ("vision", "ocr"),
    UseCase.IMAGE_TO_IMAGE: (TEXT_TO_IMAGE_TAG, "vision"),
    UseCase.IMAGE_TO_VIDEO: (TEXT_TO_VIDEO_TAG,),
    UseCase.TEXT_TO_VIDEO: (TEXT_TO_VIDEO_TAG,),
    UseCase.UNCONDITIONAL_IMAGE_GEN: (TEXT_TO_IMAGE_TAG,),
    UseCase.VIDEO_CLASSIFICATION: ("vision", "video-analysis"),
    UseCase.ZERO_SHOT_IMAGE_CLASSIFICATION: ("vision",),
    UseCase.TEXT_TO_3D: ("vision", "text-to-3d", "3d"),
    UseCase.IMAGE_TO_3D: ("vision", "image-to-3d", "3d"),
    UseCase.THREE_D_MODELING: ("3d", "vision", "text-to-3d", "image-to-3d"),

    # NLP
    UseCase.TEXT_CLASSIFICATION: ("chat", "reasoning"),
    UseCase.TOKEN_CLASSIFICATION: ("chat",),
    UseCase.TABLE_QUESTION_ANSWERING: ("qa", "reasoning"),
    UseCase.QUESTION_ANSWERING: ("qa", "chat"),
    UseCase.ZERO_SHOT_CLASSIFICATION: ("chat", "reasoning"),
    UseCase.TRANSLATION: ("translation", "multilingual", "chat"),
    UseCase.SUMMARIZATION: ("chat", "reasoning"),
    UseCase.FEATURE_EXTRACTION: ("chat",),
    UseCase.TEXT_GENERATION: ("chat", "creative"),
    UseCase.FILL_MASK: ("chat",),
    UseCase.SENTENCE_SIMILARITY: ("chat",),
    UseCase.TEXT_RANKING: ("chat",),

    # Audio
    UseCase.TEXT_TO_SPEECH: ("audio", "text-to-speech", "tts"),
    UseCase.TEXT_TO_AUDIO: ("audio", "text-to-audio", "tts"),
    UseCase.AUTOMATIC_SPEECH_RECOGNITION: ("audio", "asr", "transcription"),
    UseCase.AUDIO_TO_AUDIO: ("audio", "audio-to-audio"),
    UseCase.AUDIO_CLASSIFICATION: ("audio", "audio-classification", "classification"),

    # Other
    UseCase.TABULAR_CLASSIFICATION: ("coding", "reasoning"),
    UseCase.TABULAR_REGRESSION: ("coding", "reasoning"),
    UseCase.REINFORCEMENT_LEARNING: ("coding", "reasoning", "domain-adaptation"),
    UseCase.ROBOTICS: ("coding", "vision"),
    UseCase.GRAPH_MACHINE_LEARNING: ("coding", "reasoning"),
}

# Display grouping for prompts and listings; the engine ignores it
USE_CASE_GROUPS: List[Tuple[str, List[UseCase]]] = [
    ("Multimodal", [
        UseCase.AUDIO_TEXT_TO_TEXT,
        UseCase.IMAGE_TEXT_TO_TEXT,
        UseCase.VISUAL_QUESTION_ANSWERING,
        UseCase.DOCUMENT_QUESTION_ANSWERING,
        UseCase.VIDEO_TEXT_TO_TEXT,
        UseCase.VISUAL_DOCUMENT_RETRIEVAL,
        UseCase.ANY_TO_ANY,
    ]),
    ("Science & Research", [
        UseCase.SCIENCE,
        UseCase.PHYSICS,
        UseCase.CHEMISTRY,
        UseCase.BIOLOGY,
        UseCase.PROTEIN_BIOLOGY,
        UseCase.MEDICINE,
        UseCase.GENOMICS,
        UseCase.ENVIRONMENTAL_SCIENCE,
        UseCase.MATHEMATICS,
        UseCase.ASTRONOMY,
    ]),
    ("Computer Vision", [
        UseCase.DEPTH_ESTIMATION,
        UseCase.IMAGE_CLASSIFICATION,
        UseCase.OBJECT_DETECTION,
        UseCase.IMAGE_SEGMENTATION,
        UseCase.TEXT_TO_IMAGE,
        UseCase.IMAGE_TO_TEXT,
        UseCase.IMAGE_TO_IMAGE,
        UseCase.IMAGE_TO_VIDEO,
        UseCase.TEXT_TO_VIDEO,
        UseCase.TEXT_TO_3D,
        UseCase.IMAGE_TO_3D,
        UseCase.THREE_D_MODELING,
        UseCase.VIDEO_CLASSIFICATION,
    ]),
    ("Natural Language Processing", [
        UseCase.TEXT_GENERATION,
        UseCase.QUESTION_ANSWERING,
        UseCase.SUMMARIZATION,
        UseCase.TRANSLATION,
        UseCase.TEXT_CLASSIFICATION,
        UseCase.TOKEN_CLASSIFICATION,
        UseCase.TABLE_QUESTION_ANSWERING,
        UseCase.SENTENCE_SIMILARITY,
    ]),
    ("Audio", [
        UseCase.TEXT_TO_SPEECH,
        UseCase.AUTOMATIC_SPEECH_RECOGNITION,
        UseCase.AUDIO_CLASSIFICATION,
    ]),
    ("Tabular & RL", [
        UseCase.TABULAR_CLASSIFICATION,
        UseCase.REINFORCEMENT_LEARNING,
        UseCase.ROBOTICS,
        UseCase.GRAPH_MACHINE_LEARNING,
    ]),
]


def parse_use_case(value: Union[str, UseCase]) -> Union[UseCase, str]:
    """Resolve a use case by value or member name, leaving unknown strings as-is"""
    if isinstance(value, UseCase):
        return value
    try:
        return UseCase(value)
    except ValueError:
        pass
    key = value.strip().upper().replace("-", "_").replace(" ", "_")
    return UseCase.__members__.get(key, value)


def tags_for(use_case: Union[str, UseCase]) -> Tuple[str, ...]:
    """Capability tags for a single use case"""
    resolved = parse_use_case(use_case)
    if not isinstance(resolved, UseCase):
        return ()
    return TASK_MAPPING.get(resolved, ())


def map_use_cases(use_cases: Iterable[Union[str, UseCase]]) -> FrozenSet[str]:
    """Union the capability tags of every requested use case"""
    requested = set()
    for use_case in use_cases:
        tags = tags_for(use_case)
        if not tags:
            logger.debug(f"No capability tags mapped for use case: {use_case}")
        requested.update(tags)
    return frozenset(requested)
