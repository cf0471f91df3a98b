"""Sample capture pre-loaded by the editor, served by ``GET /demo``."""

DEMO_HTML = """\
<!-- Copied from the browser inspector -->
<header class="site-header" data-v-3f2a1c>
  <a href="/?utm_source=nav" class="logo"><img src="/assets/logo.svg?v=12" alt="Example" width="120" height="32"></a>
  <nav>
    <ul class="nav-list"><li><a href="/about?ref=header">About</a></li><li><a href="/blog#latest">Blog</a></li></ul>
  </nav>
  <script>window.dataLayer = window.dataLayer || [];</script>
</header>
<main>
  <section class="hero" style="background-image: url('/assets/hero.jpg')">
    <h1>Build <strong>faster</strong> mockups</h1>
    <p>Paste markup, get clean <code>HTML</code> back.<br>No build step required.</p>
    <picture>
      <source srcset="/assets/hero@2x.webp 2x, /assets/hero.webp 1x" type="image/webp">
      <img src="/assets/hero.png" srcset="/assets/hero@2x.png 2x" alt="">
    </picture>
    <svg class="icon" width="16" height="16"><use xlink:href="/assets/sprite.svg#arrow"></use></svg>
  </section>
  <noscript><iframe src="https://www.googletagmanager.com/ns.html"></iframe></noscript>
</main>
"""
