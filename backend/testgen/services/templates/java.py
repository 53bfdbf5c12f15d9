from .base import TemplateContext

JUNIT_BLOCK = """
    @Test
    @DisplayName("Should test basic functionality")
    void testBasicFunctionality() {{
        // Arrange
        String input = "test";

        // Act
        String result = {field}.method(input);

        // Assert
        assertNotNull(result);
        assertEquals("expected", result);
    }}

    @Test
    @DisplayName("Should handle null input")
    void testNullInput() {{
        // Act & Assert
        assertThrows(IllegalArgumentException.class, () -> {{
            {field}.method(null);
        }});
    }}
"""

SPRING_BLOCK = """
    @Test
    @DisplayName("Should test Spring integration")
    void testSpringIntegration() {{
        // Test Spring-specific functionality
        assertNotNull({field});
    }}
"""


def render_java_test(ctx: TemplateContext) -> str:
    name = ctx.name
    field = name[:1].lower() + name[1:]
    code = f"""import org.junit.jupiter.api.BeforeEach;
import org.junit.jupiter.api.DisplayName;
import org.junit.jupiter.api.Test;
import static org.junit.jupiter.api.Assertions.*;

class {name}Test {{

    private {name} {field};

    @BeforeEach
    void setUp() {{
        {field} = new {name}();
    }}
"""
    if "junit" in ctx.tags:
        code += JUNIT_BLOCK.format(field=field)
    if "spring" in ctx.tags:
        code += SPRING_BLOCK.format(field=field)
    return code + "}\n"
