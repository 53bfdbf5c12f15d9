from .base import TemplateContext


def render_generic_test(ctx: TemplateContext) -> str:
    summary = ctx.summary
    return f"""// Generated test for {summary.title}
// Framework: {summary.framework}
// Type: {summary.type}

describe('{summary.title}', () => {{
  test('should pass basic test', () => {{
    // TODO: Implement test logic based on requirements
    expect(true).toBe(true);
  }});

  test('should handle edge cases', () => {{
    // TODO: Add edge case testing
    expect(true).toBe(true);
  }});
}});
"""
