# cover_bot/data/templates.py
"""
Template registry.

The catalog is defined once at import time and never changes at runtime.
To add a template, append a `Template(...)` to `_CATALOG` below; ids must be
unique across the registry and field ids unique within a template.
The first entry is the default template offered when a session starts.
"""
from cover_bot.data.constants import FieldType, TemplateCategory
from cover_bot.dto.template import Template, TemplateField
from cover_bot.exceptions import TemplateNotFound


def _masthead(default: str, placeholder: str | None = None) -> TemplateField:
    return TemplateField(
        id="masthead",
        label="Masthead",
        type=FieldType.TEXT,
        placeholder=placeholder or default,
        default_value=default,
    )


_CATALOG: tuple[Template, ...] = (
    # --- MAGAZINES ---
    Template(
        id="vogue",
        category=TemplateCategory.MAGAZINE,
        name="Vogue",
        description="High fashion editorial style",
        aspect_ratio="3/4",
        inputs=(
            _masthead("VOGUE"),
            TemplateField(id="headline", label="Headline", type=FieldType.TEXT, placeholder="The Future of Fashion"),
            TemplateField(id="tagline", label="Tagline", type=FieldType.TEXT, placeholder="A New Era of Style"),
        ),
    ),
    Template(
        id="forbes",
        category=TemplateCategory.MAGAZINE,
        name="Forbes",
        description="Business & Success",
        aspect_ratio="3/4",
        inputs=(
            _masthead("Forbes"),
            TemplateField(id="headline", label="Headline", type=FieldType.TEXT, placeholder="The Billionaire Mindset"),
            TemplateField(id="tagline", label="Tagline", type=FieldType.TEXT, placeholder="Secrets to Success"),
        ),
    ),
    Template(
        id="billboard",
        category=TemplateCategory.MAGAZINE,
        name="Billboard",
        description="Music Industry & Charts",
        aspect_ratio="3/4",
        inputs=(
            _masthead("Billboard"),
            TemplateField(id="headline", label="Headline", type=FieldType.TEXT, placeholder="Top 100"),
            TemplateField(id="author", label="Artist Name", type=FieldType.TEXT, placeholder="Artist Name"),
        ),
    ),
    Template(
        id="natgeo",
        category=TemplateCategory.MAGAZINE,
        name="National Geographic",
        description="Nature & Science",
        aspect_ratio="3/4",
        inputs=(
            _masthead("NATIONAL GEOGRAPHIC"),
            TemplateField(id="headline", label="Headline", type=FieldType.TEXT, placeholder="The Unseen World"),
            TemplateField(id="tagline", label="Tagline", type=FieldType.TEXT, placeholder="Into the Wild"),
        ),
    ),
    # --- SOCIAL MEDIA ---
    Template(
        id="linkedin-milestone",
        category=TemplateCategory.SOCIAL,
        name="LinkedIn Milestone",
        description="Professional achievement post",
        aspect_ratio="4/5",
        inputs=(
            TemplateField(id="milestone_metric", label="Metric (e.g. Followers)", type=FieldType.TEXT, placeholder="Followers"),
            TemplateField(id="milestone_number", label="Number (e.g. 10,000)", type=FieldType.TEXT, placeholder="10,000"),
            TemplateField(id="highlight_color", label="Brand Color", type=FieldType.COLOR, default_value="#0077B5"),
            TemplateField(
                id="mood",
                label="Vibe",
                type=FieldType.SELECT,
                options=("Professional", "Excited", "Minimalist", "Bold"),
                default_value="Professional",
            ),
        ),
    ),
    Template(
        id="youtube-thumbnail",
        category=TemplateCategory.SOCIAL,
        name="YouTube Thumbnail",
        description="High CTR video cover",
        aspect_ratio="16/9",
        inputs=(
            TemplateField(id="main_text", label="Main Hook", type=FieldType.TEXT, placeholder="I BUILT AN AI APP"),
            TemplateField(id="sub_text", label="Subtext", type=FieldType.TEXT, placeholder="(It actually works)"),
            TemplateField(
                id="expression",
                label="Facial Expression",
                type=FieldType.SELECT,
                options=("Shocked", "Happy", "Serious", "Focused"),
                default_value="Shocked",
            ),
        ),
    ),
)

TEMPLATES: dict[str, Template] = {template.id: template for template in _CATALOG}

if len(TEMPLATES) != len(_CATALOG):
    raise RuntimeError("Template ids must be unique across the registry.")


def list_templates() -> list[Template]:
    """All registered templates, in catalog order."""
    return list(_CATALOG)


def get_template(template_id: str) -> Template:
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise TemplateNotFound(template_id) from None


def default_template() -> Template:
    return _CATALOG[0]
