from urllib.parse import urlparse

from repostwatch.classification.classifier import extract_domain
from repostwatch.classification.models import SocialPostInfo


def _path_parts(url: str) -> list[str]:
    return [part for part in urlparse(url).path.split("/") if part]


def _instagram(parts: list[str]) -> SocialPostInfo | None:
    if len(parts) >= 2 and parts[0] == "p":
        return SocialPostInfo(
            platform="Instagram",
            post_id=parts[1],
            description=f"Instagram post (ID: {parts[1]})",
        )
    if len(parts) >= 2 and parts[0] == "stories":
        return SocialPostInfo(
            platform="Instagram",
            username=parts[1],
            description=f"Instagram story (@{parts[1]})",
        )
    if parts and "." not in parts[0]:
        return SocialPostInfo(
            platform="Instagram",
            username=parts[0],
            is_profile=True,
            description=f"Instagram profile (@{parts[0]})",
        )
    return None


def _x(parts: list[str]) -> SocialPostInfo | None:
    if len(parts) >= 3 and parts[1] == "status":
        return SocialPostInfo(
            platform="X(Twitter)",
            username=parts[0],
            post_id=parts[2],
            description=f"X post (@{parts[0]}, ID: {parts[2]})",
        )
    if len(parts) == 1:
        return SocialPostInfo(
            platform="X(Twitter)",
            username=parts[0],
            is_profile=True,
            description=f"X profile (@{parts[0]})",
        )
    return None


def _tiktok(parts: list[str]) -> SocialPostInfo | None:
    if not parts or not parts[0].startswith("@"):
        return None
    username = parts[0][1:]
    if len(parts) >= 3 and parts[1] == "video":
        return SocialPostInfo(
            platform="TikTok",
            username=username,
            post_id=parts[2],
            description=f"TikTok video (@{username}, ID: {parts[2]})",
        )
    return SocialPostInfo(
        platform="TikTok",
        username=username,
        is_profile=True,
        description=f"TikTok profile (@{username})",
    )


def extract_social_info(url: str) -> SocialPostInfo:
    """Recover platform, handle and post id from a social-media URL."""
    domain = extract_domain(url)
    if not domain:
        return SocialPostInfo(platform="Unknown", description="Unparseable URL")

    try:
        parts = _path_parts(url)
    except ValueError:
        return SocialPostInfo(platform="Unknown", description="Unparseable URL")

    info: SocialPostInfo | None = None
    if "instagram.com" in domain:
        info = _instagram(parts)
    elif domain in ("x.com", "twitter.com") or domain.endswith((".x.com", ".twitter.com")):
        info = _x(parts)
    elif "tiktok.com" in domain:
        info = _tiktok(parts)

    if info is not None:
        return info
    return SocialPostInfo(platform=domain, description=f"Social media post ({domain})")
