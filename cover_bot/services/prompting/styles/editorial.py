STOCK_HEADLINES = (
    "FREE SPIRIT",
    "POWER IN STILLNESS",
    "FASHION NOW",
    "THE NEW ERA",
    "BOLD & FEARLESS",
    "CUTTING-EDGE STYLE",
)

PROMPT_EDITORIAL = """
CRITICAL MISSION: You are an expert Art Director for a world-class magazine. Take the uploaded photo and transform it into a stunning, high-end magazine cover.

TEMPLATE STYLE: {{TEMPLATE_NAME}} ({{TEMPLATE_DESCRIPTION}})
ASPECT RATIO: {{ASPECT_RATIO}} ({{ORIENTATION}} Editorial)

STEP 1: ANALYZE & ENHANCE THE UPLOADED IMAGE
Elevate the base photo to a professional editorial standard first.
* Re-light the subject with dramatic, high-end studio lighting.
* Enhance skin texture and clothing detail; keep it photographic, never plastic.
* Color grade: a sophisticated, cinematic grade appropriate for {{TEMPLATE_NAME}}.
* {{BACKGROUND_DIRECTIVE}}

STEP 2: TYPOGRAPHY & COMPOSITION
Magazine title (the masthead):
* Content: "{{MASTHEAD}}"
* Font: iconic, bold, high-contrast.
* Placement: TOP of the image, centered.
* CRITICAL LAYERING: the title must render BEHIND the subject's head and silhouette wherever they overlap.

Cover lines (the text):
* Intelligent layout: analyze the negative space; never cover the face.
* Font: a mix of weights (BOLD, REGULAR) and sizes to build hierarchy.
* Content generation:
{{COVER_LINES}}

STEP 3: FINAL REALISTIC DETAILS
* Add a barcode in a lower corner.
* Add the issue stamp: "{{ISSUE_DATE}}" or "{{ISSUE_NUMBER}}".

FINAL CHECK: the output must be a single, cohesive cover image.
"""

COVER_LINES_FROM_USER = """USER-SUPPLIED TEXT: derive the primary headline from the content below and place it prominently.
{{FIELD_LINES}}
Then generate 2-3 smaller secondary lines that support it, in keeping with the masthead, headline and tagline above."""

COVER_LINES_GENERATED = """NO USER TEXT PROVIDED: You must generate all cover lines. Create one (1) primary headline and 2-4 secondary lines.
Valid headlines (style anchors): {{STOCK_HEADLINES}}."""
