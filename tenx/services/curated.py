"""
Static content used when upstream services are unavailable.

CURATED_NEWS backfills an under-sized news bucket; FALLBACK_QUOTES stands in
for the quote generator.
"""

from __future__ import annotations

from datetime import datetime

from tenx.schemas.schemas import NewsArticle, Quote

_IMG = "https://images.unsplash.com/photo-{}?w=600&h=340&fit=crop"

# (id, title, description, content, url, image id, source, category)
CURATED_NEWS: list[tuple[str, str, str, str, str, str, str, str]] = [
    (
        "c1",
        "GPT-5 Achieves PhD-Level Reasoning in New Benchmarks",
        "OpenAI announces GPT-5 surpasses human PhD students on complex reasoning tasks.",
        "The latest generation of large language models continues to push boundaries. GPT-5 reportedly "
        "uses a Mixture of Experts architecture with 16 specialized sub-networks, achieving near-perfect "
        "scores on mathematical reasoning and scientific knowledge tests.",
        "https://openai.com/blog", "1677442136019-21780ecad995", "OpenAI Blog", "AI",
    ),
    (
        "c2",
        "Google DeepMind Releases Gemini 2.5 Pro with Enhanced Multimodal Understanding",
        "Gemini 2.5 Pro demonstrates state-of-the-art performance across text, image, audio, and video.",
        "Google DeepMind has unveiled Gemini 2.5 Pro featuring real-time reasoning and novel multimodal "
        "fusion techniques that seamlessly integrate text, image, audio, and video understanding.",
        "https://deepmind.google", "1620712943543-bcc4688e7485", "Google DeepMind", "AI",
    ),
    (
        "c3",
        "Meta Open-Sources LLaMA 4 with 405B Parameters",
        "Meta releases its most powerful open-source LLM with novel Gated Sparse Attention.",
        "LLaMA 4 uses a novel Gated Sparse Attention mechanism allowing it to process 128K tokens of "
        "context while using significantly less memory. Benchmarks show it matching GPT-4 Turbo.",
        "https://ai.meta.com", "1655720828018-edd2daec9349", "Meta AI", "DL",
    ),
    (
        "c4",
        "Breakthrough in Autonomous Vehicle Safety Using Reinforcement Learning",
        "New RL techniques reduce collision rates by 94% in simulation.",
        "Researchers have developed novel reinforcement learning techniques that dramatically improve "
        "autonomous vehicle safety, reducing collision rates by 94% in complex urban driving simulations.",
        "https://arxiv.org", "1549317661-bd32c8ce0aca", "arXiv", "ML",
    ),
    (
        "c5",
        "PyTorch 3.0 Released with Native Distributed Training",
        "Built-in distributed training across thousands of GPUs with minimal code.",
        "PyTorch 3.0 includes native support for distributed training, allowing researchers to scale "
        "their models across thousands of GPUs with just a few lines of code change.",
        "https://pytorch.org", "1555949963-aa79dcee981c", "PyTorch", "DL",
    ),
    (
        "c6",
        "Stanford Develops Energy-Efficient Transformer Architecture",
        "Sparse attention reduces compute by 80% while maintaining accuracy.",
        "Stanford AI Lab has developed a new sparse attention mechanism that reduces transformer compute "
        "requirements by 80% while maintaining comparable accuracy on standard benchmarks.",
        "https://stanford.edu", "1507003211169-0a1dd7228f2d", "Stanford AI Lab", "DL",
    ),
    (
        "c7",
        "AI Drug Discovery Identifies New Antibiotic Candidates",
        "ML models screen millions of compounds to find promising antibiotic candidates.",
        "Machine learning models have screened millions of chemical compounds and identified promising "
        "new antibiotic candidates that traditional methods completely missed.",
        "https://nature.com", "1532187863486-abf9dbad1b69", "Nature", "ML",
    ),
    (
        "c8",
        "NVIDIA Announces Next-Gen AI Chips for Foundation Models",
        "Blackwell Ultra delivers 30x improvement in AI training throughput.",
        "NVIDIA has announced its next-generation Blackwell Ultra architecture, delivering a massive 30x "
        "improvement in AI training throughput for foundation models.",
        "https://nvidia.com", "1591405351990-4726e331f141", "NVIDIA", "AI",
    ),
    (
        "c9",
        "Computer Vision Achieves Human-Level Medical Diagnosis",
        "Vision transformer matches radiologist accuracy across 14 imaging tasks.",
        "A new vision transformer model has achieved human-level accuracy in medical image diagnosis "
        "across 14 different imaging modalities, from X-rays to MRI scans.",
        "https://thelancet.com", "1559757175-5700dde675bc", "The Lancet", "DL",
    ),
    (
        "c10",
        "Hugging Face Surpasses 1 Million Hosted Models",
        "The AI community platform solidifies its position as the GitHub of ML.",
        "Hugging Face has surpassed one million hosted models, cementing its role as the central hub for "
        "the machine learning community.",
        "https://huggingface.co", "1618401471353-b98afee0b2eb", "Hugging Face", "ML",
    ),
    (
        "c11",
        "Federated Learning Enables Privacy-Preserving AI at Scale",
        "New techniques reduce communication costs by 100x.",
        "Advanced gradient compression techniques have made federated learning practical for billions of "
        "devices, reducing communication costs by up to 100x.",
        "https://research.google", "1563986768609-322da13575f2", "Google Research", "ML",
    ),
    (
        "c12",
        "Real-Time 4K Video Generation with Diffusion Models",
        "Temporal consistency maintained across thousands of frames.",
        "A breakthrough in video generation allows real-time 4K video creation with temporal consistency, "
        "using a novel temporal attention diffusion architecture.",
        "https://openai.com", "1536240478700-b869070f9279", "OpenAI", "DL",
    ),
    (
        "c13",
        "MIT Develops Explainable AI for Critical Decision Making",
        "Human-readable explanations for healthcare, finance, and justice.",
        "MIT CSAIL has developed a new XAI framework that provides clear, human-readable explanations for "
        "AI decisions in healthcare, finance, and criminal justice applications.",
        "https://mit.edu", "1454165804606-c3d57bc86b40", "MIT CSAIL", "AI",
    ),
    (
        "c14",
        "Synthetic Data Now Powers 60% of Enterprise ML Models",
        "Generative techniques eliminate privacy concerns in training data.",
        "A comprehensive industry study reveals that 60% of enterprise ML models now incorporate synthetic "
        "data, driven by privacy regulations and the high cost of real-world data collection.",
        "https://datascienceweekly.org", "1551288049-bebda4e38f71", "DS Weekly", "DS",
    ),
    (
        "c15",
        "Graph Neural Networks Revolutionize Protein Interaction Prediction",
        "Building on AlphaFold with unprecedented accuracy.",
        "New GNN architectures are building on AlphaFold's legacy, predicting complex protein-protein "
        "interactions with unprecedented accuracy.",
        "https://science.org", "1628595351029-c2bf17511435", "Science", "DL",
    ),
    (
        "c16",
        "AutoML Frameworks Handle End-to-End ML Pipelines",
        "Automated systems match expert-designed pipelines across 40 benchmarks.",
        "The latest AutoML frameworks can automatically handle data preprocessing, feature engineering, "
        "model selection, and hyperparameter tuning, matching expert performance.",
        "https://kaggle.com", "1460925895917-afdab827c52f", "Kaggle", "DS",
    ),
    (
        "c17",
        "Quantum Machine Learning Shows Practical Advantage",
        "IBM quantum processor achieves 10x speedup on specific ML tasks.",
        "IBM has demonstrated practical quantum advantage for machine learning, achieving a 10x speedup "
        "on kernel methods and optimization problems compared to classical hardware.",
        "https://research.ibm.com", "1635070041078-e363dbe005cb", "IBM Research", "AI",
    ),
    (
        "c18",
        "Multi-Agent AI Swarms Improve Software Engineering by 40%",
        "Specialized agents collaborate on complex tasks.",
        "OpenAI's multi-agent framework orchestrates specialized AI agents to collaborate on complex "
        "software engineering tasks, showing 40% improvement over single-agent approaches.",
        "https://openai.com", "1558618666-fcd25c85f82e", "OpenAI", "AI",
    ),
    (
        "c19",
        "Causal Inference Meets Deep Learning in Novel Hybrid Frameworks",
        "Models that understand cause-and-effect relationships.",
        "A new wave of research merges causal inference with deep learning, enabling neural networks to "
        "understand causal relationships for more robust and generalizable models.",
        "https://arxiv.org", "1504868584819-f8e8b4b6d7e3", "NeurIPS", "ML",
    ),
    (
        "c20",
        "EU AI Act Takes Effect: What ML Engineers Need to Know",
        "Risk-based requirements for AI systems in Europe.",
        "The EU AI Act establishes comprehensive risk-based requirements for AI systems, creating a "
        "framework that categorizes AI applications by risk level with corresponding obligations.",
        "https://digital-strategy.ec.europa.eu", "1451187580459-43490279c0fa", "European Commission", "AI",
    ),
]


def curated_articles(now: datetime) -> list[NewsArticle]:
    """Curated pool stamped as published/fetched at ``now``."""
    stamp = now.isoformat()
    today = now.date().isoformat()
    return [
        NewsArticle(
            id=article_id,
            title=title,
            description=description,
            content=content,
            image=_IMG.format(image_id),
            source=source,
            url=url,
            published_at=stamp,
            date=today,
            category=category,
            fetched_at=stamp,
        )
        for article_id, title, description, content, url, image_id, source, category in CURATED_NEWS
    ]


FALLBACK_QUOTES: list[Quote] = [
    Quote(
        text="The question of whether a computer can think is no more interesting than whether a submarine can swim.",
        author="Edsger Dijkstra",
        category="AI",
    ),
    Quote(
        text="Machine intelligence is the last invention that humanity will ever need to make.",
        author="Nick Bostrom",
        category="AI",
    ),
    Quote(text="Artificial intelligence would be the ultimate version of Google.", author="Larry Page", category="AI"),
    Quote(
        text="A year spent in artificial intelligence is enough to make one believe in God.",
        author="Alan Perlis",
        category="AI",
    ),
    Quote(text="In God we trust. All others must bring data.", author="W. Edwards Deming", category="DS"),
    Quote(text="Data is the new oil.", author="Clive Humby", category="DS"),
    Quote(
        text="Machine learning is the science of getting computers to learn without being explicitly programmed.",
        author="Arthur Samuel",
        category="ML",
    ),
    Quote(text="Deep learning is a superpower.", author="Andrew Ng", category="DL"),
    Quote(
        text="The future belongs to those who learn more skills and combine them in creative ways.",
        author="Robert Greene",
        category="AI",
    ),
    Quote(text="Every expert was once a beginner.", author="Helen Hayes", category="AI"),
]
