"""Design tokens shared by all WordMaster views."""


class DesignTokens:
    """Centralized design tokens for consistent styling."""
    # Colors - light study theme
    BG_PRIMARY = "#F5F7FB"
    BG_SURFACE = "#FFFFFF"
    BG_CARD = "#FFFFFF"
    BG_MUTED = "#F1F3F5"

    # Text colors
    TEXT_PRIMARY = "#1F2937"
    TEXT_SECONDARY = "#4B5563"
    TEXT_TERTIARY = "#9CA3AF"
    TEXT_ON_ACCENT = "#FFFFFF"

    # Accent colors
    ACCENT_PRIMARY = "#4F46E5"  # indigo
    ACCENT_PRIMARY_HOVER = "#4338CA"
    ACCENT_PRIMARY_SOFT = "#EEF2FF"
    ACCENT_DANGER = "#EF4444"
    ACCENT_DANGER_SOFT = "#FEF2F2"
    ACCENT_SUCCESS = "#22C55E"
    ACCENT_SUCCESS_SOFT = "#F0FDF4"
    ACCENT_INFO = "#2563EB"
    ACCENT_INFO_SOFT = "#EFF6FF"

    BORDER = "#E5E7EB"

    # Spacing
    SPACING_XS = 4
    SPACING_SM = 8
    SPACING_MD = 16
    SPACING_LG = 24
    SPACING_XL = 32

    # Border radius
    RADIUS_SM = 8
    RADIUS_MD = 12
    RADIUS_LG = 16

    # Sizes
    CARD_HEIGHT = 320
    CONTENT_MAX_WIDTH = 672

    # Typography
    FONT_SANS = "Inter, Roboto, Segoe UI, sans-serif"
