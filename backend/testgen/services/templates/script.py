import re
from typing import List

from .base import TemplateContext

EXPORT_PATTERN = re.compile(
    r"export\s+(?:default\s+)?(?:async\s+)?(?:function\s*\*?\s*(\w+)|const\s+(\w+))"
)


def exported_names(source: str) -> List[str]:
    """Exported function and const names, in order of appearance."""
    names: List[str] = []
    for match in EXPORT_PATTERN.finditer(source or ""):
        name = match.group(1) or match.group(2)
        if name and name not in names:
            names.append(name)
    return names


def _identifier(name: str) -> str:
    ident = re.sub(r"\W", "_", name)
    return ident if not ident[:1].isdigit() else f"_{ident}"


def render_script_test(ctx: TemplateContext) -> str:
    functions = exported_names(ctx.source)
    module = _identifier(ctx.name)

    if functions:
        header = f"import {{ {', '.join(functions)} }} from '../{ctx.import_path}';\n"
        target = functions[0]
    else:
        header = f"import * as {module} from '../{ctx.import_path}';\n"
        target = None

    lines = [header, "\n", f"describe('{ctx.name}', () => {{"]

    if not functions:
        lines.append(
            f"""
  test('exports a module', () => {{
    expect({module}).toBeDefined();
  }});"""
        )

    for func in functions:
        lines.append(
            f"""
  describe('{func}', () => {{
    test('should work with valid input', () => {{
      const result = {func}('test input');
      expect(result).toBeDefined();
    }});

    test('should handle edge cases', () => {{
      expect(() => {func}(null)).not.toThrow();
      expect(() => {func}(undefined)).not.toThrow();
    }});
  }});"""
        )

    if "async" in ctx.tags:
        if target:
            lines.append(
                f"""
  test('handles async operations', async () => {{
    const result = await {target}();
    expect(result).toBeDefined();
  }});

  test('handles async errors', async () => {{
    await expect({target}('invalid')).rejects.toThrow();
  }});"""
            )
        else:
            lines.append(
                f"""
  test('handles async operations', async () => {{
    await expect(Promise.resolve({module})).resolves.toBeDefined();
  }});"""
            )

    if "api" in ctx.tags:
        call = f"await {target}();" if target else f"await Promise.resolve({module});"
        lines.append(
            f"""
  describe('API calls', () => {{
    beforeEach(() => {{
      global.fetch = jest.fn(() =>
        Promise.resolve({{ ok: true, status: 200, json: () => Promise.resolve({{}}) }})
      );
    }});

    afterEach(() => {{
      jest.resetAllMocks();
    }});

    test('handles successful responses', async () => {{
      {call}
      expect(global.fetch).toHaveBeenCalled();
    }});
  }});"""
        )

    lines.append("\n});\n")
    return "".join(lines)
