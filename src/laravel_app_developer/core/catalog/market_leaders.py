"""Curated market-leader profiles by application category.

Static seed data. Valuations in USD, users as reported customer counts.
"""

from __future__ import annotations

from ..models import MarketLeader

MARKET_LEADERS: dict[str, list[dict]] = {
    "crm": [
        {
            "name": "Salesforce", "website": "salesforce.com", "valuation": 250_000_000_000,
            "founded_year": 1999, "employees": 73000, "users": 150000,
            "market_segments": ["enterprise", "sme"], "pricing_model": "subscription",
            "key_features": ["lead management", "contact management", "sales automation", "reporting", "email integration", "mobile app", "customization", "integrations", "analytics", "workflow automation"],
            "technologies": ["cloud", "mobile", "ai", "api", "saas"],
        },
        {
            "name": "HubSpot", "website": "hubspot.com", "valuation": 20_000_000_000,
            "founded_year": 2006, "employees": 7000, "users": 120000,
            "market_segments": ["sme", "enterprise"], "pricing_model": "freemium",
            "key_features": ["lead management", "contact management", "email marketing", "content management", "social media", "analytics", "landing pages", "forms", "workflows", "reporting"],
            "technologies": ["cloud", "mobile", "ai", "api", "saas"],
        },
        {
            "name": "Pipedrive", "website": "pipedrive.com", "valuation": 1_500_000_000,
            "founded_year": 2010, "employees": 850, "users": 100000,
            "market_segments": ["sme"], "pricing_model": "subscription",
            "key_features": ["pipeline management", "contact management", "email sync", "mobile app", "reporting", "automation", "integrations", "customization"],
            "technologies": ["cloud", "mobile", "api", "saas"],
        },
        {
            "name": "Monday.com", "website": "monday.com", "valuation": 7_600_000_000,
            "founded_year": 2012, "employees": 1500, "users": 180000,
            "market_segments": ["sme", "enterprise"], "pricing_model": "subscription",
            "key_features": ["project management", "team collaboration", "automation", "dashboards", "time tracking", "templates", "integrations", "mobile app"],
            "technologies": ["cloud", "mobile", "ai", "api", "saas"],
        },
        {
            "name": "Zoho CRM", "website": "zoho.com", "valuation": 1_000_000_000,
            "founded_year": 1996, "employees": 12000, "users": 250000,
            "market_segments": ["sme", "enterprise"], "pricing_model": "subscription",
            "key_features": ["lead management", "contact management", "sales automation", "email integration", "analytics", "customization", "mobile app", "social media integration"],
            "technologies": ["cloud", "mobile", "ai", "api", "saas"],
        },
    ],
    "e-commerce": [
        {
            "name": "Shopify", "website": "shopify.com", "valuation": 65_000_000_000,
            "founded_year": 2006, "employees": 10000, "users": 1700000,
            "market_segments": ["sme", "enterprise"], "pricing_model": "subscription",
            "key_features": ["online store builder", "payment processing", "inventory management", "shipping", "marketing tools", "analytics", "mobile app", "themes", "app store", "multi-channel"],
            "technologies": ["cloud", "mobile", "api", "saas", "pwa"],
        },
        {
            "name": "WooCommerce", "website": "woocommerce.com", "valuation": 1_000_000_000,
            "founded_year": 2011, "employees": 200, "users": 5000000,
            "market_segments": ["sme"], "pricing_model": "open source",
            "key_features": ["wordpress integration", "customization", "payment processing", "inventory management", "shipping", "extensions", "themes", "analytics"],
            "technologies": ["php", "wordpress", "mysql", "api"],
        },
        {
            "name": "Magento", "website": "magento.com", "valuation": 1_680_000_000,
            "founded_year": 2008, "employees": 1000, "users": 300000,
            "market_segments": ["enterprise", "sme"], "pricing_model": "open source",
            "key_features": ["b2b commerce", "b2c commerce", "multi-store", "customization", "inventory management", "payment processing", "shipping", "analytics"],
            "technologies": ["php", "mysql", "elasticsearch", "api", "cloud"],
        },
        {
            "name": "BigCommerce", "website": "bigcommerce.com", "valuation": 1_500_000_000,
            "founded_year": 2009, "employees": 1000, "users": 60000,
            "market_segments": ["sme", "enterprise"], "pricing_model": "subscription",
            "key_features": ["online store", "payment processing", "inventory management", "multi-channel", "api-first", "themes", "apps", "analytics"],
            "technologies": ["cloud", "api", "saas", "headless"],
        },
        {
            "name": "Square", "website": "squareup.com", "valuation": 29_000_000_000,
            "founded_year": 2009, "employees": 8000, "users": 4000000,
            "market_segments": ["sme"], "pricing_model": "transaction-based",
            "key_features": ["pos system", "online store", "payment processing", "inventory management", "analytics", "loyalty programs", "marketing", "mobile app"],
            "technologies": ["cloud", "mobile", "api", "saas"],
        },
    ],
    "project management": [
        {
            "name": "Asana", "website": "asana.com", "valuation": 5_500_000_000,
            "founded_year": 2008, "employees": 2000, "users": 119000,
            "market_segments": ["sme", "enterprise"], "pricing_model": "freemium",
            "key_features": ["task management", "project tracking", "team collaboration", "timelines", "dashboards", "automation", "templates", "integrations", "mobile app"],
            "technologies": ["cloud", "mobile", "ai", "api", "saas"],
        },
        {
            "name": "Trello", "website": "trello.com", "valuation": 425_000_000,
            "founded_year": 2011, "employees": 100, "users": 50000000,
            "market_segments": ["sme", "consumer"], "pricing_model": "freemium",
            "key_features": ["kanban boards", "task management", "team collaboration", "automation", "templates", "integrations", "mobile app"],
            "technologies": ["cloud", "mobile", "api", "saas"],
        },
        {
            "name": "Jira", "website": "atlassian.com", "valuation": 60_000_000_000,
            "founded_year": 2002, "employees": 8000, "users": 180000,
            "market_segments": ["enterprise", "sme"], "pricing_model": "subscription",
            "key_features": ["issue tracking", "agile planning", "project management", "reporting", "automation", "integrations", "customization"],
            "technologies": ["cloud", "mobile", "api", "saas"],
        },
        {
            "name": "Notion", "website": "notion.so", "valuation": 10_000_000_000,
            "founded_year": 2016, "employees": 500, "users": 30000000,
            "market_segments": ["sme", "consumer"], "pricing_model": "freemium",
            "key_features": ["workspace", "note-taking", "project management", "collaboration", "templates", "databases", "automation", "integrations"],
            "technologies": ["cloud", "mobile", "ai", "api", "saas"],
        },
        {
            "name": "ClickUp", "website": "clickup.com", "valuation": 4_000_000_000,
            "founded_year": 2017, "employees": 800, "users": 10000000,
            "market_segments": ["sme", "enterprise"], "pricing_model": "freemium",
            "key_features": ["task management", "project tracking", "time tracking", "docs", "goals", "automation", "templates", "integrations"],
            "technologies": ["cloud", "mobile", "ai", "api", "saas"],
        },
    ],
}


def find_similar_categories(category: str) -> list[str]:
    """Catalog categories whose name contains, or is contained in, ``category``."""
    category = category.lower()
    return [name for name in MARKET_LEADERS if name in category or category in name]


def get_market_leaders(category: str) -> list[MarketLeader]:
    """Leaders for ``category``, falling back to the first similar category."""
    entries = MARKET_LEADERS.get(category)
    if not entries:
        similar = find_similar_categories(category)
        entries = MARKET_LEADERS[similar[0]] if similar else []
    return [MarketLeader(**entry) for entry in entries]
