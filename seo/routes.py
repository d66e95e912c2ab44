# Pre-rendered at build time. Every route here should have an entry in
# seo.route_map.ROUTE_SEO_MAP.
PRERENDER_ROUTES = [
    "/",
    "/about",
    "/faq",
    "/courses",
    "/blog",
    "/blog/golf-score-tracking-tips",
    "/blog/best-golf-clubs-for-beginners",
    "/blog/improve-your-golf-swing",
    "/blog/course-management-tips",
    "/blog/understanding-golf-handicap-system",
    "/blog/stableford-scoring",
    "/blog/how-to-break-100",
    "/guides/how-to-track-golf-scores",
    "/guides/golf-handicap-calculator",
    "/guides/best-golf-score-tracking-apps",
    "/guides/golf-performance-analytics",
    "/guides/golf-statistics-tracker",
    "/golf-equipment",
    "/golf-tips",
    "/golf-lessons",
    "/demo",
    "/privacy",
]
