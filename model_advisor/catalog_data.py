"""
Built-in model catalog
"""

from .catalog import Backend, MinHardware, ModelCatalog, ModelDescriptor

# =============================================================================
# LANGUAGE MODELS
# =============================================================================

LANGUAGE_MODELS = [
    ModelDescriptor(
        name="Llama-3.2-3B-Instruct",
        repo="bartowski/Llama-3.2-3B-Instruct-GGUF",
        publisher="Meta",
        provider="Meta",
        params_b=3,
        type="LLM",
        license="Llama 3.2 Community License",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=4, vram_gb=3),
        tasks=frozenset({"chat", "creative", "qa", "reasoning", "multilingual"}),
        pinokio=True,
        text_to_video_prompt=True,
        text_to_image_prompt=True,
        description="Compact instruction-tuned chat model, a good default prompt writer for image and video pipelines.",
        libraries=("llama.cpp", "Ollama", "LM Studio"),
        cloud_providers=("AWS Bedrock", "Together AI"),
        ollama_tag="llama3.2:3b",
    ),
    ModelDescriptor(
        name="Llama-3.1-8B-Instruct",
        repo="bartowski/Meta-Llama-3.1-8B-Instruct-GGUF",
        publisher="Meta",
        provider="Meta",
        params_b=8,
        type="LLM",
        license="Llama 3.1 Community License",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="6-core x86_64 / ARM64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"chat", "creative", "qa", "reasoning", "coding", "multilingual", "translation"}),
        pinokio=True,
        description="General-purpose 8B assistant with 128K context and strong tool use.",
        libraries=("llama.cpp", "Ollama", "vLLM"),
        cloud_providers=("AWS Bedrock", "Groq", "Together AI"),
        ollama_tag="llama3.1:8b",
    ),
    ModelDescriptor(
        name="Mistral-7B-Instruct-v0.3",
        repo="bartowski/Mistral-7B-Instruct-v0.3-GGUF",
        publisher="Mistral AI",
        provider="Mistral AI",
        params_b=7,
        type="LLM",
        license="Apache 2.0",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="6-core x86_64 / ARM64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"chat", "creative", "qa", "summarization"}),
        description="Fast 7B instruction model with function calling support.",
        libraries=("llama.cpp", "Ollama"),
        cloud_providers=("Mistral La Plateforme",),
        ollama_tag="mistral:7b",
    ),
    ModelDescriptor(
        name="Qwen2.5-7B-Instruct",
        repo="Qwen/Qwen2.5-7B-Instruct-GGUF",
        publisher="Alibaba Cloud",
        provider="Qwen",
        params_b=7.6,
        type="LLM",
        license="Apache 2.0",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="6-core x86_64 / ARM64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"chat", "reasoning", "coding", "math", "multilingual", "translation"}),
        pinokio=True,
        description="Multilingual 7B model strong at structured output, math and code.",
        libraries=("llama.cpp", "Ollama", "vLLM"),
        cloud_providers=("Alibaba Cloud Model Studio",),
        ollama_tag="qwen2.5:7b",
    ),
    ModelDescriptor(
        name="Qwen2.5-Coder-7B-Instruct",
        repo="Qwen/Qwen2.5-Coder-7B-Instruct-GGUF",
        publisher="Alibaba Cloud",
        provider="Qwen",
        params_b=7.6,
        type="LLM",
        license="Apache 2.0",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="6-core x86_64 / ARM64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"coding", "reasoning", "chat"}),
        description="Code-specialized Qwen for completion, repair and data wrangling.",
        libraries=("llama.cpp", "Ollama", "Continue"),
        ollama_tag="qwen2.5-coder:7b",
    ),
    ModelDescriptor(
        name="Qwen2.5-32B-Instruct-AWQ",
        repo="Qwen/Qwen2.5-32B-Instruct-AWQ",
        publisher="Alibaba Cloud",
        provider="Qwen",
        params_b=32.5,
        type="LLM",
        license="Apache 2.0",
        formats=frozenset({"SafeTensors", "AWQ"}),
        backend=Backend.PYTORCH,
        quantization="AWQ 4-bit",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=24),
        tasks=frozenset({"chat", "reasoning", "coding", "math", "multilingual"}),
        description="32B model quantized with AWQ for single 24GB GPU serving.",
        libraries=("vLLM", "transformers", "AutoAWQ"),
        cloud_providers=("Alibaba Cloud Model Studio",),
    ),
    ModelDescriptor(
        name="Phi-3.5-mini-instruct",
        repo="microsoft/Phi-3.5-mini-instruct-onnx",
        publisher="Microsoft",
        provider="Microsoft",
        params_b=3.8,
        type="LLM",
        license="MIT",
        formats=frozenset({"ONNX", "SafeTensors"}),
        backend=Backend.ONNX,
        quantization="INT4 AWQ",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=6, vram_gb=4),
        tasks=frozenset({"chat", "reasoning", "math", "qa", "summarization"}),
        description="Small reasoning-focused model exported for ONNX Runtime GenAI on CPU, DirectML and CUDA.",
        libraries=("onnxruntime-genai",),
        cloud_providers=("Azure AI Foundry",),
    ),
    ModelDescriptor(
        name="gemma-2-9b-it",
        repo="bartowski/gemma-2-9b-it-GGUF",
        publisher="Google",
        provider="Google",
        params_b=9,
        type="LLM",
        license="Gemma Terms of Use",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64 / ARM64", ram_gb=12, vram_gb=8),
        tasks=frozenset({"chat", "creative", "qa", "summarization", "multilingual"}),
        description="Google's 9B open model with strong writing quality.",
        libraries=("llama.cpp", "Ollama", "Keras"),
        cloud_providers=("Google Vertex AI",),
        ollama_tag="gemma2:9b",
    ),
    ModelDescriptor(
        name="DeepSeek-R1-Distill-Qwen-7B",
        repo="bartowski/DeepSeek-R1-Distill-Qwen-7B-GGUF",
        publisher="DeepSeek",
        provider="DeepSeek",
        params_b=7.6,
        type="LLM",
        license="MIT",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="6-core x86_64 / ARM64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"reasoning", "math", "science", "coding", "formula"}),
        pinokio=True,
        description="Chain-of-thought reasoning distilled from DeepSeek-R1 into a 7B Qwen base.",
        libraries=("llama.cpp", "Ollama"),
        cloud_providers=("DeepSeek API", "Together AI"),
        ollama_tag="deepseek-r1:7b",
    ),
    ModelDescriptor(
        name="Llama-3.2-3B-Instruct-4bit",
        repo="mlx-community/Llama-3.2-3B-Instruct-4bit",
        publisher="MLX Community",
        provider="Meta",
        params_b=3,
        type="LLM",
        license="Llama 3.2 Community License",
        formats=frozenset({"MLX", "SafeTensors"}),
        backend=Backend.MLX,
        quantization="4-bit",
        apple_silicon_optimized=True,
        min_hardware=MinHardware(cpu="Apple M1", ram_gb=8, vram_gb=0),
        tasks=frozenset({"chat", "creative", "qa", "reasoning"}),
        text_to_image_prompt=True,
        description="MLX 4-bit conversion of Llama 3.2 3B for fast local chat on Apple Silicon.",
        libraries=("mlx-lm",),
    ),
    ModelDescriptor(
        name="Qwen2.5-7B-Instruct-4bit",
        repo="mlx-community/Qwen2.5-7B-Instruct-4bit",
        publisher="MLX Community",
        provider="Qwen",
        params_b=7.6,
        type="LLM",
        license="Apache 2.0",
        formats=frozenset({"MLX", "SafeTensors"}),
        backend=Backend.MLX,
        quantization="4-bit",
        apple_silicon_optimized=True,
        min_hardware=MinHardware(cpu="Apple M1", ram_gb=12, vram_gb=0),
        tasks=frozenset({"chat", "reasoning", "coding", "math", "multilingual", "translation"}),
        description="MLX build of Qwen2.5 7B, multilingual chat and code on Apple Silicon.",
        libraries=("mlx-lm",),
    ),
]

# =============================================================================
# VISION & MULTIMODAL
# =============================================================================

VISION_MODELS = [
    ModelDescriptor(
        name="Qwen2-VL-7B-Instruct",
        repo="Qwen/Qwen2-VL-7B-Instruct",
        publisher="Alibaba Cloud",
        provider="Qwen",
        params_b=8.3,
        type="VLM",
        license="Apache 2.0",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="BF16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=16),
        tasks=frozenset({"vision", "ocr", "qa", "chat", "video-analysis"}),
        description="Vision-language model reading documents, charts and short videos.",
        libraries=("transformers", "vLLM"),
    ),
    ModelDescriptor(
        name="Qwen2-VL-2B-Instruct-4bit",
        repo="mlx-community/Qwen2-VL-2B-Instruct-4bit",
        publisher="MLX Community",
        provider="Qwen",
        params_b=2.2,
        type="VLM",
        license="Apache 2.0",
        formats=frozenset({"MLX", "SafeTensors"}),
        backend=Backend.MLX,
        quantization="4-bit",
        apple_silicon_optimized=True,
        min_hardware=MinHardware(cpu="Apple M1", ram_gb=8, vram_gb=0),
        tasks=frozenset({"vision", "ocr", "qa", "chat"}),
        description="Small VLM for image understanding via mlx-vlm.",
        libraries=("mlx-vlm",),
    ),
    ModelDescriptor(
        name="llava-v1.6-mistral-7b",
        repo="cjpais/llava-1.6-mistral-7b-gguf",
        publisher="LLaVA",
        provider="LLaVA",
        params_b=7.6,
        type="VLM",
        license="Apache 2.0",
        formats=frozenset({"GGUF"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="6-core x86_64 / ARM64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"vision", "qa", "chat", "ocr"}),
        pinokio=True,
        description="LLaVA 1.6 on a Mistral base with higher input resolution.",
        libraries=("llama.cpp", "Ollama"),
        ollama_tag="llava:7b",
    ),
    ModelDescriptor(
        name="moondream2",
        repo="vikhyatk/moondream2",
        publisher="vikhyatk",
        provider="Moondream",
        params_b=1.9,
        type="VLM",
        license="Apache 2.0",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="FP16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=4, vram_gb=2),
        tasks=frozenset({"vision", "qa", "ocr", "object-detection"}),
        description="Tiny vision-language model for captioning, pointing and detection on edge devices.",
        libraries=("transformers", "Ollama"),
    ),
    ModelDescriptor(
        name="Florence-2-large",
        repo="microsoft/Florence-2-large",
        publisher="Microsoft",
        provider="Microsoft",
        params_b=0.77,
        type="Vision",
        license="MIT",
        formats=frozenset({"SafeTensors", "ONNX"}),
        backend=Backend.PYTORCH,
        quantization="FP16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=4, vram_gb=2),
        tasks=frozenset({"vision", "ocr", "object-detection"}),
        description="Prompt-based captioning, OCR, grounding and segmentation in one sub-1B model.",
        libraries=("transformers",),
    ),
    ModelDescriptor(
        name="Depth-Anything-V2-Small",
        repo="depth-anything/Depth-Anything-V2-Small-hf",
        publisher="Depth Anything",
        provider="TikTok",
        params_b=0.025,
        type="Vision",
        license="Apache 2.0",
        formats=frozenset({"SafeTensors", "ONNX"}),
        backend=Backend.ONNX,
        quantization="FP32",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=2, vram_gb=0),
        tasks=frozenset({"vision", "depth"}),
        description="Monocular depth estimation small enough for CPU inference.",
        libraries=("transformers", "onnxruntime"),
    ),
    ModelDescriptor(
        name="TripoSR",
        repo="stabilityai/TripoSR",
        publisher="Stability AI",
        provider="Stability AI",
        params_b=0.4,
        type="3D",
        license="MIT",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="FP16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"vision", "image-to-3d", "3d"}),
        pinokio=True,
        description="Single-image to textured mesh reconstruction in under a second on GPU.",
        libraries=("torch",),
    ),
]

# =============================================================================
# IMAGE & VIDEO GENERATION
# =============================================================================

GENERATION_MODELS = [
    ModelDescriptor(
        name="FLUX.1-schnell",
        repo="black-forest-labs/FLUX.1-schnell",
        publisher="Black Forest Labs",
        provider="Black Forest Labs",
        params_b=12,
        type="Diffusion",
        license="Apache 2.0",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="FP8",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=12),
        tasks=frozenset({"text-to-image"}),
        pinokio=True,
        description="Four-step distilled FLUX text-to-image model.",
        libraries=("diffusers", "ComfyUI"),
        cloud_providers=("Replicate", "fal.ai"),
    ),
    ModelDescriptor(
        name="FLUX.1-schnell-mflux-4bit",
        repo="dhairyashil/FLUX.1-schnell-mflux-4bit",
        publisher="MLX Community",
        provider="Black Forest Labs",
        params_b=12,
        type="Diffusion",
        license="Apache 2.0",
        formats=frozenset({"MLX"}),
        backend=Backend.MLX,
        quantization="4-bit",
        apple_silicon_optimized=True,
        min_hardware=MinHardware(cpu="Apple M1 Pro", ram_gb=16, vram_gb=0),
        tasks=frozenset({"text-to-image"}),
        description="FLUX.1 schnell quantized for the mflux MLX runtime.",
        libraries=("mflux",),
    ),
    ModelDescriptor(
        name="stable-diffusion-xl-base-1.0",
        repo="stabilityai/stable-diffusion-xl-base-1.0",
        publisher="Stability AI",
        provider="Stability AI",
        params_b=3.5,
        type="Diffusion",
        license="OpenRAIL++-M",
        formats=frozenset({"SafeTensors", "ONNX"}),
        backend=Backend.PYTORCH,
        quantization="FP16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=8),
        tasks=frozenset({"text-to-image", "vision"}),
        pinokio=True,
        description="SDXL base with the largest ecosystem of LoRAs and ControlNets.",
        libraries=("diffusers", "ComfyUI", "Automatic1111"),
        cloud_providers=("Replicate",),
    ),
    ModelDescriptor(
        name="stable-diffusion-3.5-medium",
        repo="stabilityai/stable-diffusion-3.5-medium",
        publisher="Stability AI",
        provider="Stability AI",
        params_b=2.5,
        type="Diffusion",
        license="Stability AI Community License",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="FP16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=10),
        tasks=frozenset({"text-to-image"}),
        description="MMDiT-X text-to-image model balancing quality and consumer-GPU footprint.",
        libraries=("diffusers", "ComfyUI"),
    ),
    ModelDescriptor(
        name="MagicPrompt-Stable-Diffusion",
        repo="Gustavosta/MagicPrompt-Stable-Diffusion",
        publisher="Gustavosta",
        provider="Community",
        params_b=0.124,
        type="LLM",
        license="MIT",
        formats=frozenset({"SafeTensors", "ONNX"}),
        backend=Backend.PYTORCH,
        quantization="FP32",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="2-core x86_64 / ARM64", ram_gb=2, vram_gb=0),
        tasks=frozenset({"creative"}),
        text_to_image_prompt=True,
        description="GPT-2 fine-tune that expands short ideas into detailed diffusion prompts.",
        libraries=("transformers",),
    ),
    ModelDescriptor(
        name="LTX-Video",
        repo="Lightricks/LTX-Video",
        publisher="Lightricks",
        provider="Lightricks",
        params_b=2,
        type="Video",
        license="OpenRAIL-M",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="BF16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=12),
        tasks=frozenset({"text-to-video"}),
        pinokio=True,
        description="Real-time DiT video generator for text-to-video and image-to-video.",
        libraries=("diffusers", "ComfyUI"),
    ),
    ModelDescriptor(
        name="CogVideoX-5b",
        repo="THUDM/CogVideoX-5b",
        publisher="THUDM",
        provider="Zhipu AI",
        params_b=5,
        type="Video",
        license="CogVideoX License",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="BF16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=32, vram_gb=16),
        tasks=frozenset({"text-to-video"}),
        description="Six-second 720x480 clips from text prompts.",
        libraries=("diffusers",),
    ),
    ModelDescriptor(
        name="Wan2.1-T2V-1.3B",
        repo="Wan-AI/Wan2.1-T2V-1.3B",
        publisher="Alibaba Cloud",
        provider="Wan-AI",
        params_b=1.3,
        type="Video",
        license="Apache 2.0",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="BF16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=8),
        tasks=frozenset({"text-to-video", "vision"}),
        pinokio=True,
        description="Lightweight Wan 2.1 text-to-video model that fits consumer GPUs.",
        libraries=("diffusers", "ComfyUI"),
    ),
]

# =============================================================================
# AUDIO
# =============================================================================

AUDIO_MODELS = [
    ModelDescriptor(
        name="whisper-large-v3-turbo",
        repo="openai/whisper-large-v3-turbo",
        publisher="OpenAI",
        provider="OpenAI",
        params_b=0.81,
        type="ASR",
        license="MIT",
        formats=frozenset({"SafeTensors", "GGUF", "ONNX"}),
        backend=Backend.PYTORCH,
        quantization="FP16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=4, vram_gb=4),
        tasks=frozenset({"audio", "asr", "transcription", "translation"}),
        pinokio=True,
        description="Pruned Whisper large-v3 decoder, multilingual transcription at several times the speed.",
        libraries=("transformers", "whisper.cpp", "faster-whisper"),
        cloud_providers=("OpenAI API", "Groq"),
    ),
    ModelDescriptor(
        name="whisper-large-v3-turbo-mlx",
        repo="mlx-community/whisper-large-v3-turbo",
        publisher="MLX Community",
        provider="OpenAI",
        params_b=0.81,
        type="ASR",
        license="MIT",
        formats=frozenset({"MLX"}),
        backend=Backend.MLX,
        quantization="FP16",
        apple_silicon_optimized=True,
        min_hardware=MinHardware(cpu="Apple M1", ram_gb=8, vram_gb=0),
        tasks=frozenset({"audio", "asr", "transcription"}),
        description="Whisper turbo for mlx-whisper on Apple Silicon.",
        libraries=("mlx-whisper",),
    ),
    ModelDescriptor(
        name="Kokoro-82M",
        repo="hexgrad/Kokoro-82M",
        publisher="hexgrad",
        provider="Community",
        params_b=0.082,
        type="TTS",
        license="Apache 2.0",
        formats=frozenset({"SafeTensors", "ONNX"}),
        backend=Backend.ONNX,
        quantization="FP32",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="2-core x86_64 / ARM64", ram_gb=2, vram_gb=0),
        tasks=frozenset({"audio", "text-to-speech", "tts"}),
        pinokio=True,
        description="82M-parameter TTS with natural voices that runs in real time on CPU.",
        libraries=("kokoro", "onnxruntime"),
    ),
    ModelDescriptor(
        name="bark",
        repo="suno/bark",
        publisher="Suno",
        provider="Suno",
        params_b=0.9,
        type="TTS",
        license="MIT",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="FP16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=8, vram_gb=8),
        tasks=frozenset({"audio", "text-to-speech", "text-to-audio", "tts"}),
        description="Generative audio model producing speech, music and sound effects.",
        libraries=("transformers",),
    ),
    ModelDescriptor(
        name="ast-finetuned-audioset",
        repo="MIT/ast-finetuned-audioset-10-10-0.4593",
        publisher="MIT",
        provider="MIT",
        params_b=0.087,
        type="Audio",
        license="BSD-3-Clause",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="FP32",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=2, vram_gb=0),
        tasks=frozenset({"audio", "audio-classification", "classification"}),
        description="Audio Spectrogram Transformer tagging 527 AudioSet classes.",
        libraries=("transformers",),
    ),
]

# =============================================================================
# SCIENCE
# =============================================================================

SCIENCE_MODELS = [
    ModelDescriptor(
        name="esm2_t33_650M_UR50D",
        repo="facebook/esm2_t33_650M_UR50D",
        publisher="Meta",
        provider="Meta",
        params_b=0.65,
        type="Protein",
        license="MIT",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="FP32",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="4-core x86_64 / ARM64", ram_gb=4, vram_gb=4),
        tasks=frozenset({"protein", "biology", "science"}),
        description="Protein language model for embeddings, contact and variant-effect prediction.",
        libraries=("transformers", "fair-esm"),
    ),
    ModelDescriptor(
        name="BioMistral-7B",
        repo="BioMistral/BioMistral-7B-GGUF",
        publisher="BioMistral",
        provider="BioMistral",
        params_b=7,
        type="LLM",
        license="Apache 2.0",
        formats=frozenset({"GGUF", "SafeTensors"}),
        backend=Backend.GGUF,
        quantization="Q4_K_M",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="6-core x86_64 / ARM64", ram_gb=8, vram_gb=6),
        tasks=frozenset({"medicine", "biology", "science", "qa"}),
        description="Mistral further pre-trained on PubMed Central for biomedical QA.",
        libraries=("llama.cpp", "transformers"),
    ),
    ModelDescriptor(
        name="Qwen2.5-Math-7B-Instruct",
        repo="Qwen/Qwen2.5-Math-7B-Instruct",
        publisher="Alibaba Cloud",
        provider="Qwen",
        params_b=7.6,
        type="LLM",
        license="Apache 2.0",
        formats=frozenset({"SafeTensors"}),
        backend=Backend.PYTORCH,
        quantization="BF16",
        apple_silicon_optimized=False,
        min_hardware=MinHardware(cpu="8-core x86_64", ram_gb=16, vram_gb=16),
        tasks=frozenset({"math", "reasoning", "formula"}),
        description="Math-specialized Qwen solving with chain-of-thought and tool-integrated reasoning.",
        libraries=("transformers", "vLLM"),
    ),
]

MODELS = LANGUAGE_MODELS + VISION_MODELS + GENERATION_MODELS + AUDIO_MODELS + SCIENCE_MODELS

BUILTIN_CATALOG = ModelCatalog(MODELS)
