"""Document injector: turn the host container into a rendered diagram."""

from __future__ import annotations

import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from mermaid_render.errors import RenderError
from mermaid_render.models import DiagramInputs, RenderRequest

logger = logging.getLogger(__name__)

# Runs inside the page. Mermaid config is passed as one explicit
# object; initialize() must precede run() or it is ignored. Custom
# CSS goes into themeCSS too so it is inlined in the serialized svg.
# Deterministic ids keep repeated svg renders byte-identical.
_RENDER_SCRIPT = """
async ({ definition, theme, chartConfig, customCss, background }) => {
  const container = document.querySelector('#container');
  container.innerHTML = definition;

  const config = {
    startOnLoad: false,
    deterministicIds: true,
    theme,
    ...(chartConfig || {}),
  };
  if (customCss) {
    config.themeCSS = (config.themeCSS || '') + customCss;
  }
  window.mermaid.initialize(config);

  if (customCss) {
    const style = document.createElement('style');
    style.textContent = customCss;
    document.head.appendChild(style);
  }

  document.body.style.background = background;

  await window.mermaid.run({ nodes: [container] });

  if (!container.querySelector('svg')) {
    throw new Error('Mermaid produced no <svg> element');
  }
}
"""


def build_render_args(
    request: RenderRequest, inputs: DiagramInputs
) -> dict[str, object]:
    """Arguments handed to the in-page render script."""
    return {
        "definition": inputs.definition,
        "theme": str(request.theme),
        "chartConfig": inputs.chart_config,
        "customCss": inputs.custom_css,
        "background": request.background_color,
    }


async def inject_diagram(
    page: Page,
    request: RenderRequest,
    inputs: DiagramInputs,
) -> None:
    """Inject the definition, apply styling, and run Mermaid.

    Blocks until the in-page render finishes. Anything thrown in the
    page (usually a diagram syntax error) becomes a RenderError.
    """
    try:
        await page.evaluate(
            _RENDER_SCRIPT, build_render_args(request, inputs)
        )
    except PlaywrightError as exc:
        logger.warning(
            "event=render_failed input=%s", request.input_path
        )
        raise RenderError.from_page_error(
            "Rendering diagram", exc
        ) from exc
    logger.debug(
        "event=diagram_rendered theme=%s config=%s css=%s",
        request.theme,
        inputs.chart_config is not None,
        inputs.custom_css is not None,
    )
