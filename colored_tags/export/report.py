from ..color import apca_contrast, to_color, wcag_contrast
from ..tags.resolver import MIN_APCA_CONTRAST, MIN_WCAG_CONTRAST


def check_tag_colors(colors):
    """Measure one resolved pair.

    Returns:
        tuple: (wcag ratio, apca Lc, passes bool)
    """
    background = to_color(colors.background)
    foreground = to_color(colors.foreground)
    wcag = wcag_contrast(foreground, background)
    apca = apca_contrast(foreground, background)
    passes = wcag >= MIN_WCAG_CONTRAST and abs(apca) >= MIN_APCA_CONTRAST
    return wcag, apca, passes


def generate_contrast_report(engine, tags=None):
    """Generate a readability report of every tag in both themes"""
    if tags is None:
        tags = engine.known_tags()

    report = []
    report.append("=" * 70)
    report.append("TAG CONTRAST REPORT")
    report.append("=" * 70)
    report.append(f"Palette size: {len(engine.palettes['light'])}")
    if engine.hue_offset is None:
        report.append("Palette source: custom colors")
    else:
        report.append(f"Hue offset: {engine.hue_offset}")
    report.append(f"Requirements: WCAG >= {MIN_WCAG_CONTRAST}:1, |APCA| >= {MIN_APCA_CONTRAST}")

    issues = []

    for theme in ("light", "dark"):
        report.append(f"\n{theme.upper()} THEME")
        report.append("-" * 50)
        for tag in tags:
            colors = engine.get_colors_for(tag, theme)
            wcag, apca, passes = check_tag_colors(colors)
            status = "✓" if passes else "✗ FAIL"
            if not passes:
                issues.append((theme, tag, wcag, apca))
            report.append(
                f"  {tag:30} slot {engine.registry.slot(tag):3}  "
                f"WCAG {wcag:4.1f}:1  APCA {apca:6.1f}  {status}"
            )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for theme, tag, wcag, apca in issues:
            report.append(f"  - {tag} ({theme}): WCAG {wcag:.1f}:1, APCA {apca:.1f}")
    else:
        report.append("ALL TAGS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues
