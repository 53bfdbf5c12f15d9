from .base import TemplateContext

RENDER_BLOCK = """
  test('renders without crashing', () => {{
    render(<{name} />);
    expect(screen.getByRole('main')).toBeInTheDocument();
  }});

  test('displays expected content', () => {{
    render(<{name} />);
    // Add specific content assertions based on your component
    expect(screen.getByText(/expected text/i)).toBeInTheDocument();
  }});"""

PROPS_BLOCK = """
  test('handles props correctly', () => {{
    const mockProps = {{
      title: 'Test Title',
      onClick: jest.fn()
    }};
    render(<{name} {{...mockProps}} />);
    expect(screen.getByText('Test Title')).toBeInTheDocument();
  }});

  test('handles missing props gracefully', () => {{
    render(<{name} />);
    // Component should render with default values
    expect(screen.getByRole('main')).toBeInTheDocument();
  }});"""

EVENTS_BLOCK = """
  test('handles click events', () => {{
    const mockHandler = jest.fn();
    render(<{name} onClick={{mockHandler}} />);

    const button = screen.getByRole('button');
    fireEvent.click(button);

    expect(mockHandler).toHaveBeenCalledTimes(1);
  }});"""

STATE_BLOCK = """
  test('updates state correctly', () => {{
    render(<{name} />);

    const button = screen.getByRole('button');
    fireEvent.click(button);

    // Assert state change is reflected in UI
    expect(screen.getByText(/updated/i)).toBeInTheDocument();
  }});"""

EFFECTS_BLOCK = """
  test('runs side effects after mount', async () => {{
    const {{ unmount }} = render(<{name} />);

    await waitFor(() => {{
      expect(screen.getByRole('main')).toBeInTheDocument();
    }});

    // Cleanup functions must not throw
    expect(() => unmount()).not.toThrow();
  }});"""

BLOCKS = (
    ("render", RENDER_BLOCK),
    ("props", PROPS_BLOCK),
    ("events", EVENTS_BLOCK),
    ("state", STATE_BLOCK),
    ("effects", EFFECTS_BLOCK),
)


def render_component_test(ctx: TemplateContext) -> str:
    name = ctx.name
    parts = [
        "import React from 'react';\n"
        "import { render, screen, fireEvent, waitFor } from '@testing-library/react';\n"
        "import '@testing-library/jest-dom';\n"
        f"import {name} from '../{ctx.import_path}';\n"
        "\n"
        f"describe('{name}', () => {{"
    ]
    for tag, block in BLOCKS:
        if tag in ctx.tags:
            parts.append(block.format(name=name))
    parts.append("\n});\n")
    return "".join(parts)
