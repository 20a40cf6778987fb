"""Built-in shell template shared by every page."""

DEFAULT_SHELL = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{% if page.title != site.title %}{{ page.title }} | {% endif %}{{ site.title }}</title>
  <meta name="description" content="{{ page.description }}">
  {%- if site.author %}
  <meta name="author" content="{{ site.author }}">
  {%- endif %}
  <meta property="og:title" content="{{ page.title }}">
  <meta property="og:description" content="{{ page.description }}">
  <meta property="og:type" content="{% if page.date %}article{% else %}website{% endif %}">
  {%- if site.base_url %}
  <meta property="og:url" content="{{ site.base_url }}{{ page.url }}">
  <link rel="canonical" href="{{ site.base_url }}{{ page.url }}">
  {%- endif %}
  <link rel="stylesheet" href="/style.css">
  <script>
    (function () {
      var stored = localStorage.getItem("theme");
      var prefersDark = window.matchMedia("(prefers-color-scheme: dark)").matches;
      document.documentElement.dataset.theme = stored || (prefersDark ? "dark" : "light");
    })();
  </script>
</head>
<body class="layout-{{ page.layout }}">
  <header class="site-header">
    <a class="site-title" href="/">{{ site.title }}</a>
    <nav>
      <a href="/">Home</a>
      <a href="/blog/">Blog</a>
    </nav>
    <button type="button" class="theme-toggle" aria-label="Toggle dark mode">&#9681;</button>
  </header>
  <main>
    <article>
      {%- if page.title != site.title %}
      <h1>{{ page.title }}</h1>
      {%- endif %}
      {%- if page.date %}
      <p class="post-date"><time datetime="{{ page.date_iso }}">{{ page.date }}</time></p>
      {%- endif %}
      {%- if page.updated %}
      <p class="post-updated">Updated <time datetime="{{ page.updated_iso }}">{{ page.updated }}</time></p>
      {%- endif %}
      {{ page.content }}
    </article>
  </main>
  <footer class="site-footer">
    {%- if page.previous or page.next %}
    <nav class="post-nav">
      {%- if page.previous %}
      <a class="post-nav__previous" rel="prev" href="{{ page.previous.url }}">&larr; {{ page.previous.title }}</a>
      {%- endif %}
      {%- if page.next %}
      <a class="post-nav__next" rel="next" href="{{ page.next.url }}">{{ page.next.title }} &rarr;</a>
      {%- endif %}
    </nav>
    {%- endif %}
    {%- if site.author %}
    <p>&copy; {{ site.author }}</p>
    {%- endif %}
  </footer>
  <script>
    document.querySelector(".theme-toggle").addEventListener("click", function () {
      var next = document.documentElement.dataset.theme === "dark" ? "light" : "dark";
      document.documentElement.dataset.theme = next;
      localStorage.setItem("theme", next);
    });
  </script>
</body>
</html>
"""
