BACKGROUND_REPLACE = (
    "Analyze the existing background. If it is busy or distracting, replace it with a clean, "
    "minimalist studio background. Valid backgrounds: a solid color, a subtle gradient, or an "
    "abstract, atmospheric, out-of-focus texture."
)

BACKGROUND_KEEP = (
    "DO NOT REPLACE THE BACKGROUND. Keep it as close to the original photo as possible; "
    "only adjust its lighting and color so it matches the relit subject."
)
