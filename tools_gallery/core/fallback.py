from __future__ import annotations

from tools_gallery.core.entry import Catalog, Entry

# Installed by the loader when the dataset cannot be fetched or parsed.
# The category set stays empty so the selector shows no stale options.
FALLBACK_ENTRIES = (
    Entry(
        category="AI创新工具",
        name="ChatGPT",
        description="OpenAI的对话AI，能够进行自然语言对话，回答问题，协助创作等。",
        official_url="https://chat.openai.com",
        icon_url="https://ai-bot.cn/wp-content/uploads/2025/07/Chatgpt-logo.png",
    ),
    Entry(
        category="AI绘画工具",
        name="Midjourney",
        description="AI图像生成工具，可以根据文字描述生成高质量的艺术图像。",
        official_url="https://www.midjourney.com/home",
        icon_url="https://ai-bot.cn/wp-content/uploads/2023/03/midjourney-icon.png",
    ),
    Entry(
        category="AI视频工具",
        name="Runway",
        description="AI视频工具，提供绿幕抠除、视频生成、动态捕捉等功能。",
        official_url="https://runwayml.com/?utm_source=ai-bot.cn",
        icon_url="https://ai-bot.cn/wp-content/uploads/2023/03/runwayml-icon.png",
    ),
)


def fallback_catalog() -> Catalog:
    return Catalog(entries=FALLBACK_ENTRIES, categories=())
