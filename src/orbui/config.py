class UIConfig:
    # Layout
    safe_margin_px = 24
    orb_steps = 48       # concentric rings approximating the radial gradient
    glow_rings = 24

    # Colors
    bg = "#0E0E14"
    fg = "#FFFFFF"
    text_muted = "#A0A0A0"

    # Fonts
    period_font = ("DejaVu Sans", 22, "bold")
    detail_font = ("DejaVu Sans", 12)
