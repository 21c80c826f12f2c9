"""Site configuration loading."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import titlecase as tc
import yaml

from notebook_publisher.core.models import ConfigError
from notebook_publisher.core.parser import slugify

ENV_VARS = {
    'blog_root': 'BLOG_ROOT',
    'vault_root': 'VAULT_ROOT',
    'site_title': 'SITE_TITLE',
    'site_description': 'SITE_DESCRIPTION',
    'site_url': 'SITE_URL',
    'output_dir': 'OUTPUT_DIR',
}

PATH_FIELDS = {'blog_root', 'vault_root', 'output_dir'}


@dataclass
class SiteConfig:
    """Everything a build reads: source folders, output location and site copy."""
    blog_root: Path
    vault_root: Optional[Path] = None
    output_dir: Path = field(default_factory=Path.cwd)
    site_title: str = 'My Blog'
    site_description: str = 'Thoughts, stories, and ideas.'
    site_url: str = 'http://localhost:3000'
    series_dir: str = 'Fractal'
    articles_dir: str = 'Main'
    projects_dir: str = 'Projects'
    series_title: str = 'Fractal Bootcamp'
    series_description: str = 'A 90-day journey through a software engineering bootcamp in NYC.'
    author_name: str = 'Frank'
    profile_image: str = 'profile.jpeg'
    hero_subtitle: str = 'You can see some of my work below 👇'
    hero_bio: str = (
        "Hi there! My name is Frank, and I'm a software engineer! This site is a "
        "personal collection of reading, writing, and experiences inside and "
        "outside of engineering."
    )
    titlecase_titles: bool = False

    def __post_init__(self):
        self.blog_root = Path(self.blog_root)
        self.output_dir = Path(self.output_dir)
        if self.vault_root is None:
            self.vault_root = self.blog_root.parent
        else:
            self.vault_root = Path(self.vault_root)

    @property
    def series_source(self) -> Path:
        return self.blog_root / self.series_dir

    @property
    def articles_source(self) -> Path:
        return self.blog_root / self.articles_dir

    @property
    def projects_source(self) -> Path:
        return self.blog_root / self.projects_dir

    @property
    def series_slug(self) -> str:
        """URL stem of the series index page, e.g. ``fractal``."""
        return slugify(self.series_dir)

    @property
    def series_name(self) -> str:
        """Display name of the series, e.g. ``Fractal``."""
        return tc.titlecase(self.series_dir)

    @property
    def posts_output(self) -> Path:
        return self.output_dir / 'posts'

    @property
    def series_output(self) -> Path:
        return self.output_dir / 'series'

    @property
    def images_output(self) -> Path:
        return self.output_dir / 'images'

    @property
    def index_path(self) -> Path:
        return self.output_dir / 'index.html'

    @property
    def writing_path(self) -> Path:
        return self.output_dir / 'writing.html'


def _coerce(name: str, value: Any, expected: Any, config_path: Path) -> Any:
    """Check a config file value against its SiteConfig field type.

    Numbers given for text or path fields are turned into strings, so
    ``site_title: 2024`` means the title ``2024``.
    """
    if value is None:
        return None
    if expected is bool:
        if not isinstance(value, bool):
            raise ConfigError(f"{name} in {config_path} must be true or false, got {value!r}")
        return value
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    raise ConfigError(f"{name} in {config_path} must be text, got {type(value).__name__}")


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    """Read a YAML config file into a dict of SiteConfig fields.

    Args:
        config_path: Path to the YAML file

    Returns:
        Mapping of field name to value

    Raises:
        ConfigError: If the file is not a mapping, names unknown fields
            or holds a value of the wrong type
    """
    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    types = {f.name: f.type for f in fields(SiteConfig)}
    unknown = sorted(set(data) - set(types))
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")

    return {name: _coerce(name, value, types[name], config_path) for name, value in data.items()}


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> SiteConfig:
    """Build a SiteConfig from a config file, the environment and overrides.

    Later layers win: defaults, then the YAML file, then environment
    variables, then keyword overrides whose value is not None.

    Args:
        config_path: Optional YAML file with SiteConfig fields
        environ: Environment mapping (default: os.environ)
        **overrides: Explicit field values, typically from the command line

    Returns:
        The resolved SiteConfig

    Raises:
        ConfigError: If no blog root is configured or the file is invalid
    """
    if environ is None:
        environ = os.environ

    values: Dict[str, Any] = {}
    if config_path is not None:
        values.update(_read_config_file(Path(config_path)))

    for name, var in ENV_VARS.items():
        if environ.get(var):
            values[name] = environ[var]

    values.update({k: v for k, v in overrides.items() if v is not None})

    if not values.get('blog_root'):
        raise ConfigError("BLOG_ROOT is not set")

    for name in PATH_FIELDS:
        if values.get(name) is not None:
            values[name] = Path(values[name]).expanduser()

    return SiteConfig(**values)
