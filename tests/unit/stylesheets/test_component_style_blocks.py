from __future__ import annotations

from classlint.stylesheets import extract_style_block_classes, style_blocks

COMPONENT = """
<script>
  let open = false;
</script>

<div class="panel">...</div>

<style lang="postcss">
  .panel { padding: 1rem; }
  .panel.is-open :global(.child) { display: block; }
</style>
<style>
  @keyframes slide { from { opacity: 0 } }
</style>
"""


def test_style_blocks_are_returned_in_order() -> None:
    blocks = style_blocks(COMPONENT)

    assert len(blocks) == 2
    assert ".panel" in blocks[0]
    assert "@keyframes" in blocks[1]


def test_component_classes_include_global_arguments_and_keyframes() -> None:
    assert extract_style_block_classes(COMPONENT) == {"panel", "is-open", "child", "slide"}


def test_component_without_styles_defines_nothing() -> None:
    assert extract_style_block_classes("<div class='x'></div>") == set()
