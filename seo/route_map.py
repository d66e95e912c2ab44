"""Route-to-SEO metadata for build-time tag injection.

Keep this table in sync with the page components' own head tags and with
PRERENDER_ROUTES in seo.routes.
"""

from typing import Dict, Optional, Tuple

from models.seo import RouteSEO

ROUTE_SEO_MAP: Dict[str, RouteSEO] = {
    # Core pages
    "/": RouteSEO(
        title="Golf Score Tracker & Handicap Calculator | MyBirdieBoard",
        description="Track golf scores, calculate handicap, analyze performance. Free to start with 4 rounds. Join golfers improving their game with MyBirdieBoard.",
        keywords="golf score tracking, golf handicap calculator, golf performance analytics, course leaderboards, digital golf scorecard",
    ),
    "/about": RouteSEO(
        title="About Us - Golf Score Tracking App | MyBirdieBoard",
        description="MyBirdieBoard is a distraction-free golf score tracker. Log rounds after you play, track handicap, and compete on course leaderboards.",
        keywords="golf score tracking, golf analytics, golf performance tracking, golf handicap, golf statistics tracker",
    ),
    "/faq": RouteSEO(
        title="Golf Score Tracking FAQ | MyBirdieBoard",
        description="Answers to common golf tracking questions. Learn about handicaps, Stableford scoring, subscriptions, and how to add courses.",
        keywords="golf FAQ, golf score tracking questions, golf handicap FAQ, MyBirdieBoard help",
    ),
    "/courses": RouteSEO(
        title="Golf Courses Directory | MyBirdieBoard",
        description="Browse golf courses with player stats and leaderboards. Find courses by location and compare your scores with other golfers.",
        keywords="golf courses, golf course directory, course leaderboards, golf course stats",
    ),
    "/blog": RouteSEO(
        title="Golf Blog - Tips, Analytics & Performance Insights | MyBirdieBoard",
        description="Expert golf tips, performance analytics insights, and score tracking strategies. Improve your golf game with data-driven advice from MyBirdieBoard's golf blog.",
        keywords="golf blog, golf tips, golf analytics, golf performance, golf score tracking tips, golf handicap advice",
    ),
    "/demo": RouteSEO(
        title="Demo Dashboard - See MyBirdieBoard in Action",
        description="Experience MyBirdieBoard's golf tracking features with our interactive demo. See how easy it is to track scores, analyze performance, and improve your game.",
    ),
    "/golf-equipment": RouteSEO(
        title="Best Golf Equipment 2025 | MyBirdieBoard",
        description="Discover top golf equipment for 2025. GPS watches, clubs, balls, and gear to improve your game. Expert reviews included.",
        keywords="golf equipment, golf GPS watches, golf clubs, golf gear 2025",
    ),
    "/golf-tips": RouteSEO(
        title="Golf Tips to Lower Your Scores | MyBirdieBoard",
        description="Expert golf tips for swing, short game, course management, and practice. Data-driven strategies to improve fast.",
        keywords="golf tips, golf improvement, golf swing tips, short game tips, course management",
    ),
    "/golf-lessons": RouteSEO(
        title="Find Golf Lessons Near You | MyBirdieBoard",
        description="Find golf lessons and professional instruction. Private lessons, group classes, online coaching, and golf clinics.",
        keywords="golf lessons, golf instruction, golf coaching, golf clinics",
    ),
    "/privacy": RouteSEO(
        title="Privacy Policy - How MyBirdieBoard Protects Your Golf Data | MyBirdieBoard",
        description="Read MyBirdieBoard's Privacy Policy. Learn how we collect, protect, and handle your golf scores, account information, and personal data. Your privacy matters to us.",
        keywords="MyBirdieBoard privacy policy, golf app privacy, golf data protection, user data security",
    ),
    # Blog posts
    "/blog/golf-score-tracking-tips": RouteSEO(
        title="10 Essential Golf Score Tracking Tips for Better Performance | MyBirdieBoard",
        description="Master golf score tracking with these 10 proven tips. Learn professional techniques to improve your game through better data collection and analysis.",
        keywords="golf score tracking tips, golf performance tracking, digital golf scorecard, golf statistics, golf improvement",
        og_type="article",
    ),
    "/blog/best-golf-clubs-for-beginners": RouteSEO(
        title="Best Golf Clubs for Beginners 2025 - Complete Buying Guide | MyBirdieBoard",
        description="Discover the best golf clubs for beginners in 2025. Expert recommendations on drivers, irons, putters, and complete sets to start your golf journey right.",
        keywords="best golf clubs for beginners, beginner golf clubs, golf equipment, golf club sets, starter golf clubs",
        og_type="article",
    ),
    "/blog/improve-your-golf-swing": RouteSEO(
        title="How to Improve Your Golf Swing - 10 Proven Tips for Better Performance | MyBirdieBoard",
        description="Fix common swing faults like slicing and hooking with 10 expert tips. Master grip, posture, rotation, and follow-through to hit more fairways and lower scores.",
        keywords="improve golf swing, golf swing tips, golf technique, better golf swing, golf fundamentals",
        og_type="article",
    ),
    "/blog/course-management-tips": RouteSEO(
        title="Golf Course Management: Strategy Tips to Lower Your Score | MyBirdieBoard",
        description="Master golf course management with these strategic tips. Learn when to be aggressive, how to avoid big numbers, and make smarter decisions on the course.",
        keywords="golf course management, golf strategy, course management tips, smart golf, golf tactics",
        og_type="article",
    ),
    "/blog/understanding-golf-handicap-system": RouteSEO(
        title="Understanding Golf Handicap System - Complete Guide 2026 | MyBirdieBoard",
        description="Complete guide to the World Handicap System (WHS). Understand slope ratings, course handicaps, score differentials, and how to establish your first handicap index.",
        keywords="golf handicap, handicap system, calculate golf handicap, handicap index, WHS, World Handicap System",
        og_type="article",
    ),
    "/blog/stableford-scoring": RouteSEO(
        title="What is Stableford Scoring in Golf? Complete Guide & Calculator | MyBirdieBoard",
        description="Learn how Stableford scoring works in golf, how to calculate points for each hole, and why it's a popular alternative to stroke play. Track Stableford scores with MyBirdieBoard.",
        keywords="stableford scoring, stableford points, golf stableford, stableford calculator, stableford scoring system",
        og_type="article",
    ),
    "/blog/how-to-break-100": RouteSEO(
        title="How to Break 100 in Golf: 15 Proven Tips for Beginners | MyBirdieBoard",
        description="Learn how to break 100 in golf with 15 proven tips. From course management to avoiding big numbers, discover strategies to help you shoot in the 90s.",
        keywords="how to break 100 in golf, break 100, golf tips for beginners, golf scoring tips",
        og_type="article",
    ),
    "/blog/match-play-scoring": RouteSEO(
        title="How to Keep Score in Match Play Golf | MyBirdieBoard",
        description="Learn how to keep score in match play golf. Understand holes up/down, dormie, concessions, handicap strokes, and all the rules for match play scoring.",
        keywords="match play scoring, how to keep score match play, match play golf rules, match play vs stroke play, dormie, golf match play",
        og_type="article",
    ),
    "/blog/putts-per-round": RouteSEO(
        title="How Many Putts Per Round is Good? Putting Stats by Handicap | MyBirdieBoard",
        description="Find out how many putts per round is good for your skill level. Putting averages by handicap, PGA Tour benchmarks, and tips to lower your putts per round.",
        keywords="putts per round, how many putts per round is good, putting average, putting stats, putts per GIR, golf putting statistics",
        og_type="article",
    ),
    "/blog/how-to-calculate-golf-handicap": RouteSEO(
        title="How to Calculate Golf Handicap: Beginner's Guide | MyBirdieBoard",
        description="Learn how to calculate your golf handicap step by step. A simple beginner-friendly guide to the World Handicap System, score differentials, and handicap index.",
        keywords="how to calculate golf handicap, golf handicap for beginners, handicap index, score differential, World Handicap System",
        og_type="article",
    ),
    "/blog/golf-stats-to-track": RouteSEO(
        title="Golf Stats You Should Track to Improve | MyBirdieBoard",
        description="Discover the most important golf statistics to track. From fairways hit to putts per round, learn which stats reveal where you're losing strokes.",
        keywords="golf stats to track, golf statistics, fairways in regulation, greens in regulation, putts per round, golf analytics",
        og_type="article",
    ),
    "/blog/playing-without-phone": RouteSEO(
        title="Why Playing Golf Without Your Phone Might Be the Best Decision You Make | MyBirdieBoard",
        description="Discover why keeping your phone in the bag during a round leads to better focus, lower scores, and more enjoyment.",
        keywords="golf without phone, golf focus, golf mental game, distraction free golf, post round tracking, golf flow state",
        og_type="article",
    ),
    # Guide pages
    "/guides/how-to-track-golf-scores": RouteSEO(
        title="How to Track Golf Scores | MyBirdieBoard",
        description="Learn how to track golf scores effectively. Digital tools, apps, and best practices for beginners and pros.",
        keywords="how to track golf scores, golf score tracking, golf scorecard, digital golf scorecard",
        og_type="article",
    ),
    "/guides/golf-handicap-calculator": RouteSEO(
        title="Golf Handicap Calculator Guide | MyBirdieBoard",
        description="Learn how to calculate your golf handicap step by step using the official WHS method. Free handicap tracking.",
        keywords="golf handicap calculator, how to calculate golf handicap, WHS handicap, handicap index",
        og_type="article",
    ),
    "/guides/best-golf-score-tracking-apps": RouteSEO(
        title="Best Golf Score Apps 2025 | MyBirdieBoard",
        description="Compare the best golf score tracking apps. Features, pricing, and which app is right for your game.",
        keywords="best golf score apps, golf score tracking apps, golf apps 2025, golf handicap apps",
        og_type="article",
    ),
    "/guides/golf-performance-analytics": RouteSEO(
        title="Golf Performance Analytics Guide | MyBirdieBoard",
        description="Use data to improve your golf game. Learn to analyze stats, identify weaknesses, and track progress.",
        keywords="golf performance analytics, golf statistics, strokes gained, golf improvement, golf metrics",
        og_type="article",
    ),
    "/guides/golf-statistics-tracker": RouteSEO(
        title="Golf Statistics Tracker Guide | MyBirdieBoard",
        description="Track key golf statistics to improve your game. Fairways, greens in regulation, putts, and more.",
        keywords="golf statistics tracker, golf stats, golf metrics, golf performance stats",
        og_type="article",
    ),
}


def normalize_route(route_path: str) -> str:
    """Strip trailing slashes, keeping the root path as "/"."""
    if route_path == "/":
        return "/"
    return route_path.rstrip("/") or "/"


def lookup_route(route_path: str) -> Tuple[str, Optional[RouteSEO]]:
    """Normalized path and its metadata entry (None when the route is unmapped)."""
    normalized = normalize_route(route_path)
    return normalized, ROUTE_SEO_MAP.get(normalized)
