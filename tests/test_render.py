from gifgrid.models.gifs import ImageItem
from gifgrid.render import ERROR_MESSAGE, DisplayRegion, GridRenderer, render_page


def test_render_images_in_order():
    region = DisplayRegion()
    GridRenderer().render_images(region, [ImageItem(url="https://x/1.gif"), ImageItem(url="https://x/2.gif")])
    assert region.image_sources == ["https://x/1.gif", "https://x/2.gif"]
    assert region.inner_html.count("<img ") == 2
    assert 'class="img-fluid" alt="GIF"' in region.inner_html


def test_render_replaces_existing_content():
    region = DisplayRegion()
    renderer = GridRenderer()
    renderer.render_images(region, [ImageItem(url="https://x/1.gif")])
    renderer.render_error(region)
    assert region.images == []
    assert len(region.errors) == 1
    renderer.render_images(region, [ImageItem(url="https://x/2.gif")])
    assert region.errors == []
    assert region.image_sources == ["https://x/2.gif"]


def test_image_markup_is_escaped():
    fragment = GridRenderer().image(ImageItem(url='https://x/"><script>.gif', alt="a<b"))
    assert "<script>" not in fragment.html
    assert "&quot;&gt;&lt;script&gt;" in fragment.html
    assert 'alt="a&lt;b"' in fragment.html
    assert fragment.src == 'https://x/"><script>.gif'


def test_error_notice():
    fragment = GridRenderer().error()
    assert fragment.kind == "error"
    assert 'class="alert alert-danger"' in fragment.html
    assert ERROR_MESSAGE in fragment.html


def test_region_html_wraps_fragments():
    region = DisplayRegion()
    assert region.to_html() == '<div id="gif-container" class="row g-3"></div>'


def test_page_has_ui_surface():
    html = render_page("GIF Search", DisplayRegion(), term='a "b"')
    assert 'id="search-input"' in html
    assert 'id="fetch-gif-btn"' in html
    assert 'id="gif-container"' in html
    assert 'value="a &quot;b&quot;"' in html
    assert "<script>" not in html


def test_page_alert_is_a_js_string():
    html = render_page("GIF Search", DisplayRegion(), alert='Say "hi"</script>')
    assert '<script>alert("Say \\"hi\\"<\\/script>");</script>' in html
