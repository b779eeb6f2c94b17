"""SVG-to-PNG rendering through an external converter process

The social-preview image is an SVG template with a `__TEXT__` marker. The
text is XML-escaped into the template and the document is piped into
`rsvg-convert`, which writes the PNG.

The converter writes to a temporary file next to the destination, which is
renamed onto the destination only after a successful exit. A cache file that
exists is therefore always complete.

Functions:
    load_og_template() -> str
        Read the packaged SVG template.
    build_og_svg(template: str, text: str) -> str
        Substitute escaped text into the template.
    render_og_image_to_file(text: str, dest: Path, ...) -> None
        Render text into a PNG file at dest.

Example:
    >>> render_og_image_to_file('Parabéns, Joana', Path('/tmp/og/parab-ns--joana.png'))
"""

import os
import shutil
import logging
import tempfile
import subprocess
from pathlib import Path

from parabens.render.exceptions import ConverterUnavailableError, RenderTimeoutError, ProcessFailureError
from parabens.utils.config import public_dir
from parabens.utils.helpers import escape_xml
from parabens.utils.constants import OG_CONVERTER, OG_IMAGE_WIDTH, OG_IMAGE_HEIGHT, OG_RENDER_TIMEOUT_SECONDS


logger = logging.getLogger(__name__)

TEXT_MARKER = '__TEXT__'


def load_og_template() -> str:
    return (public_dir() / 'og-template.svg').read_text(encoding='utf-8')


def build_og_svg(template: str, text: str) -> str:
    return template.replace(TEXT_MARKER, escape_xml(text))


def render_og_image_to_file(
    text: str,
    dest: Path,
    *,
    template: str | None = None,
    converter: str = OG_CONVERTER,
    width: int = OG_IMAGE_WIDTH,
    height: int = OG_IMAGE_HEIGHT,
    timeout: float = OG_RENDER_TIMEOUT_SECONDS,
) -> None:
    """Render `text` into a PNG file at `dest`

    Procedure:
    - Step 1: Locate the converter binary on PATH
    - Step 2: Build the SVG document from the template
    - Step 3: Run `<converter> -w <width> -h <height> -o <tmp>` with the SVG on stdin
    - Step 4: Rename the temporary PNG onto dest

    Args:
        text (str):
            Literal text to render (escaped here).
        dest (Path):
            Final PNG location. Parent directories are created on demand.
        template (str | None):
            SVG template. Defaults to the packaged `og-template.svg`.
        converter (str):
            Converter executable name or path. Defaults to 'rsvg-convert'.
        width (int), height (int):
            Output size in pixels. Defaults to 600x315.
        timeout (float):
            Seconds to wait for the converter before killing it. Defaults to 5.

    Raises:
        ConverterUnavailableError:
            If the converter can't be located or executed.
        RenderTimeoutError:
            If the converter exceeded the timeout (it was killed).
        ProcessFailureError:
            If the converter exited with a nonzero status.
        OSError:
            If the cache directory or the output can't be written.

    NOTE: dest is never left half-written; on any failure the temporary
          output is removed and dest is untouched.
    """
    # 1- Locate the converter
    executable = shutil.which(converter)
    if executable is None:
        raise ConverterUnavailableError(f"'{converter}' not found on PATH.")

    # 2- Build the SVG document
    svg = build_og_svg(load_og_template() if template is None else template, text)

    # 3- Run the converter into a temporary file in the destination directory
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f'.{dest.stem}.', suffix='.png.tmp', dir=dest.parent)
    os.close(fd)
    tmp_path = Path(tmp_name)

    # fmt: off
    command = [executable,
               '-w', str(width),
               '-h', str(height),
               '-o', str(tmp_path)]
    # fmt: on

    try:
        subprocess.run(command, input=svg.encode('utf-8'), capture_output=True, timeout=timeout, check=True)  # noqa: S603
    except subprocess.TimeoutExpired as e:
        raise RenderTimeoutError(f"'{converter}' did not finish within {timeout}s.") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b'').decode('utf-8', errors='replace').strip()
        raise ProcessFailureError(f"'{converter}' exited with status {e.returncode}: {stderr}") from e
    except OSError as e:
        # Binary vanished or isn't executable between lookup and exec
        raise ConverterUnavailableError(f"Can't execute '{executable}'.") from e
    else:
        # 4- Publish the finished image
        os.replace(tmp_path, dest)
        logger.debug('Rendered OG image.', extra={'dest': str(dest)})
    finally:
        tmp_path.unlink(missing_ok=True)
