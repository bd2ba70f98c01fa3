"""System design templates keyed by system type, complexity level and business model."""

TYPE_KEYWORDS = {
    "crm": ["crm", "customer relationship", "sales", "lead management"],
    "e-commerce": ["e-commerce", "online store", "marketplace", "shopping"],
    "project-management": ["project management", "task management", "team collaboration"],
    "social-media": ["social media", "social network", "community"],
    "fintech": ["fintech", "banking", "payment", "financial"],
    "healthcare": ["healthcare", "medical", "health"],
    "education": ["education", "learning", "e-learning", "course"],
}

NAME_ADJECTIVES = ["Smart", "Pro", "Advanced", "Elite", "Premier", "Next-Gen", "Ultra"]

TYPE_NAMES = {
    "crm": ["CRM", "Sales Hub", "Customer Platform"],
    "e-commerce": ["Commerce", "Marketplace", "Store"],
    "project-management": ["ProjectHub", "WorkSpace", "TeamFlow"],
    "social-media": ["Social", "Connect", "Community"],
    "fintech": ["FinTech", "PayFlow", "FinanceHub"],
    "healthcare": ["HealthTech", "MedFlow", "HealthHub"],
    "education": ["EduTech", "LearnFlow", "AcademyHub"],
    "custom": ["Platform", "System", "Solution"],
}

VISIONS = {
    "crm": "To revolutionize customer relationship management by providing an intelligent, intuitive platform that helps businesses build stronger customer relationships and drive sustainable growth.",
    "e-commerce": "To create the world's most user-friendly and powerful e-commerce platform that enables businesses of all sizes to sell online successfully.",
    "project-management": "To transform how teams collaborate and manage projects by providing a seamless, intelligent platform that increases productivity and project success rates.",
    "social-media": "To build a next-generation social platform that fosters meaningful connections and authentic community building.",
    "fintech": "To democratize financial services through innovative technology that makes financial management accessible, secure, and intelligent.",
    "healthcare": "To improve healthcare outcomes by providing cutting-edge technology solutions that enhance patient care and streamline healthcare operations.",
    "education": "To transform education through technology that makes learning more engaging, accessible, and effective for learners worldwide.",
    "custom": "To create an innovative software solution that addresses real-world challenges and delivers exceptional value to users.",
}

COMPLEXITY_BENEFITS = {
    "startup-mvp": ["Quick time to market", "Cost-effective solution", "Essential features focus"],
    "standard": ["Comprehensive functionality", "Scalable architecture", "Professional features"],
    "enterprise": ["Enterprise-grade security", "Advanced integrations", "Custom workflows"],
    "industry-leading": ["Cutting-edge innovation", "AI-powered insights", "Market disruption potential"],
}

TYPE_BENEFITS = {
    "crm": ["Increase sales conversion by 30%", "Improve customer retention", "Streamline sales processes"],
    "e-commerce": ["Boost online sales", "Reduce cart abandonment", "Improve customer experience"],
    "project-management": ["Increase team productivity by 40%", "Improve project delivery rates", "Enhanced collaboration"],
    "social-media": ["Build engaged communities", "Increase user engagement", "Foster meaningful connections"],
    "fintech": ["Reduce transaction costs", "Improve financial transparency", "Enhanced security"],
    "healthcare": ["Improve patient outcomes", "Reduce administrative burden", "Enhanced care coordination"],
    "education": ["Improve learning outcomes", "Increase student engagement", "Personalized learning"],
    "custom": ["Solve specific business challenges", "Improve operational efficiency", "Drive innovation"],
}

PERSONAS = {
    "crm": [
        {
            "name": "Sales Manager",
            "description": "Oversees sales team and needs visibility into sales pipeline",
            "goals": ["Track team performance", "Manage sales pipeline", "Generate reports"],
            "pain_points": ["Lack of visibility", "Manual reporting", "Data silos"],
        },
        {
            "name": "Sales Representative",
            "description": "Front-line salesperson focused on converting leads",
            "goals": ["Manage leads efficiently", "Close more deals", "Track customer interactions"],
            "pain_points": ["Lead management complexity", "Poor customer data", "Time-consuming admin"],
        },
    ],
    "e-commerce": [
        {
            "name": "Online Shopper",
            "description": "Consumer looking for convenient online shopping experience",
            "goals": ["Find products quickly", "Secure checkout", "Fast delivery"],
            "pain_points": ["Complex navigation", "Security concerns", "Slow checkout"],
        },
        {
            "name": "Store Owner",
            "description": "Business owner managing online store",
            "goals": ["Increase sales", "Manage inventory", "Understand customer behavior"],
            "pain_points": ["Inventory management", "Payment processing", "Customer acquisition"],
        },
    ],
}

DEFAULT_PERSONAS = [
    {
        "name": "Primary User",
        "description": "Main user of the system",
        "goals": ["Accomplish tasks efficiently", "Easy to use interface", "Reliable performance"],
        "pain_points": ["Complex workflows", "Poor user experience", "System limitations"],
    },
]

BASE_FEATURES = {
    "crm": {
        "core": ["Contact management", "Lead tracking", "Sales pipeline", "Task management", "Basic reporting", "Email integration"],
        "advanced": ["Sales automation", "Custom fields", "Advanced reporting", "Email marketing", "Document management", "Team collaboration"],
        "premium": ["AI-powered insights", "Predictive analytics", "Advanced integrations", "Custom workflows", "Advanced security"],
    },
    "e-commerce": {
        "core": ["Product catalog", "Shopping cart", "Checkout process", "Payment processing", "Order management", "Customer accounts"],
        "advanced": ["Inventory management", "Multi-currency support", "Shipping calculator", "Product reviews", "Wishlists", "Analytics dashboard"],
        "premium": ["AI recommendations", "Advanced analytics", "Multi-vendor support", "Advanced SEO tools", "Custom integrations"],
    },
}

DEFAULT_BASE_FEATURES = {
    "core": ["User management", "Basic functionality", "Dashboard"],
    "advanced": ["Advanced features", "Integrations", "Reporting"],
    "premium": ["Enterprise features", "Custom workflows", "Advanced analytics"],
}

COMPLEXITY_FEATURES = {
    "startup-mvp": [],
    "standard": ["API access", "Third-party integrations", "Advanced search"],
    "enterprise": ["SSO integration", "Advanced security", "Audit logs", "Custom branding"],
    "industry-leading": ["AI/ML features", "Advanced analytics", "Predictive insights", "Blockchain integration"],
}

AI_FEATURES = {
    "crm": ["Lead scoring", "Sales forecasting", "Automated follow-ups", "Customer sentiment analysis", "Predictive analytics"],
    "e-commerce": ["Product recommendations", "Price optimization", "Inventory forecasting", "Customer behavior analysis", "Chatbot support"],
    "project-management": ["Task prioritization", "Resource optimization", "Timeline prediction", "Risk assessment", "Automated reporting"],
}

DEFAULT_AI_FEATURES = ["Intelligent automation", "Predictive analytics", "Natural language processing", "Machine learning insights"]

MOBILE_FEATURES = [
    "Responsive design",
    "Mobile app (iOS/Android)",
    "Offline functionality",
    "Push notifications",
    "Touch-optimized interface",
]

ARCHITECTURE_PATTERNS = {
    "startup-mvp": "Monolithic Architecture",
    "standard": "Layered Architecture",
    "enterprise": "Microservices Architecture",
    "industry-leading": "Event-Driven Microservices",
}
DEFAULT_ARCHITECTURE_PATTERN = "Layered Architecture"

ARCHITECTURE_LAYERS = {
    "Presentation Layer": "User interface and user experience",
    "API Layer": "RESTful APIs for data operations",
    "Business Logic Layer": "Core application logic and business rules",
    "Data Access Layer": "Database operations and data management",
    "Infrastructure Layer": "Hosting, monitoring, and deployment",
}

BASE_COMPONENTS = [
    "User Management Service",
    "Authentication Service",
    "Authorization Service",
    "Notification Service",
    "File Storage Service",
    "Audit Logging Service",
]

TYPE_COMPONENTS = {
    "crm": ["Lead Management Service", "Contact Service", "Sales Pipeline Service"],
    "e-commerce": ["Product Service", "Cart Service", "Payment Service", "Order Service"],
    "project-management": ["Project Service", "Task Service", "Team Service"],
}

BASE_INTEGRATIONS = [
    "Email service (SendGrid, Mailgun)",
    "Payment gateway (Stripe, PayPal)",
    "File storage (AWS S3, Google Cloud)",
    "Analytics (Google Analytics)",
]

TYPE_INTEGRATIONS = {
    "crm": ["Mailchimp", "Zapier", "Google Workspace", "Slack"],
    "e-commerce": ["Shopify", "WooCommerce", "QuickBooks", "Xero"],
    "project-management": ["Jira", "GitHub", "Slack", "Microsoft Teams"],
}

SCALABILITY_CONSIDERATIONS = [
    "Horizontal scaling capability",
    "Load balancing",
    "Caching strategies",
    "Database optimization",
    "CDN implementation",
]

TECHNOLOGY_STACKS = {
    "laravel": {
        "backend": ["Laravel 11", "PHP 8.3", "Laravel Sanctum"],
        "frontend": ["Vue.js 3", "Inertia.js", "Tailwind CSS"],
        "database": ["MySQL 8.0", "Redis"],
        "infrastructure": ["AWS/Digital Ocean", "Docker", "GitHub Actions"],
    },
    "node": {
        "backend": ["Node.js", "Express.js", "TypeScript"],
        "frontend": ["React 18", "Next.js", "Tailwind CSS"],
        "database": ["PostgreSQL", "Redis"],
        "infrastructure": ["Vercel", "Docker", "GitHub Actions"],
    },
}
DEFAULT_TECH_PREFERENCE = "laravel"

BASE_ENTITIES = {
    "User": ["id", "name", "email", "password", "created_at", "updated_at"],
    "Role": ["id", "name", "permissions"],
    "Setting": ["id", "key", "value", "user_id"],
}

TYPE_ENTITIES = {
    "crm": {
        "Contact": ["id", "name", "email", "phone", "company", "user_id"],
        "Lead": ["id", "name", "email", "status", "source", "assigned_to"],
        "Deal": ["id", "name", "value", "stage", "contact_id", "user_id"],
    },
    "e-commerce": {
        "Product": ["id", "name", "description", "price", "stock", "category_id"],
        "Order": ["id", "user_id", "total", "status", "created_at"],
        "OrderItem": ["id", "order_id", "product_id", "quantity", "price"],
    },
}

USER_FLOWS = {
    "crm": [
        "Lead capture and qualification",
        "Contact management and communication",
        "Sales pipeline progression",
        "Report generation and analysis",
    ],
    "e-commerce": [
        "Product discovery and search",
        "Add to cart and checkout",
        "Order tracking and management",
        "Returns and refunds",
    ],
}

DEFAULT_USER_FLOWS = [
    "User registration and onboarding",
    "Main feature usage",
    "Settings and configuration",
    "Support and help",
]

DESIGN_PRINCIPLES = ["User-centered design", "Intuitive navigation", "Consistent interface", "Responsive design", "Accessibility compliance"]

UI_COMPONENTS = [
    "Design system with consistent colors and typography",
    "Reusable component library",
    "Responsive grid system",
    "Loading states and feedback",
    "Error handling and validation",
]

ACCESSIBILITY_FEATURES = ["WCAG 2.1 AA compliance", "Keyboard navigation", "Screen reader support", "High contrast mode", "Font size adjustment"]

SECURITY_FRAMEWORK = {
    "authentication": ["Multi-factor authentication", "OAuth 2.0 / OpenID Connect", "Session management", "Password policies"],
    "authorization": ["Role-based access control (RBAC)", "Attribute-based access control (ABAC)", "API rate limiting", "Resource-level permissions"],
    "data_protection": ["Data encryption at rest and in transit", "PII data handling", "GDPR compliance", "Regular security audits"],
    "infrastructure_security": ["SSL/TLS certificates", "Firewall configuration", "Intrusion detection", "Regular security updates"],
}

SCALABILITY_PLAN = {
    "horizontal_scaling": ["Load balancers", "Auto-scaling groups", "Database read replicas", "CDN implementation"],
    "performance_optimization": ["Caching strategies (Redis, Memcached)", "Database query optimization", "Asset optimization and compression", "Lazy loading implementation"],
    "monitoring_and_alerting": ["Application performance monitoring", "Database performance monitoring", "Error tracking and logging", "Automated alerting system"],
}

MONETIZATION_STRATEGIES = {
    "saas": {
        "pricing_model": "Subscription-based (monthly/yearly)",
        "tiers": ["Basic ($29/month)", "Professional ($79/month)", "Enterprise ($199/month)"],
        "revenue_streams": ["Subscriptions", "Add-ons", "Professional services"],
    },
    "marketplace": {
        "pricing_model": "Commission-based",
        "tiers": ["Transaction fees (2-5%)", "Listing fees", "Premium features"],
        "revenue_streams": ["Transaction fees", "Advertising", "Premium listings"],
    },
    "freemium": {
        "pricing_model": "Free tier with paid upgrades",
        "tiers": ["Free (limited)", "Pro ($19/month)", "Business ($49/month)"],
        "revenue_streams": ["Premium subscriptions", "Add-ons", "Support"],
    },
}
DEFAULT_BUSINESS_MODEL = "saas"

COMPETITIVE_ADVANTAGES = {
    "startup-mvp": ["Quick time to market", "Cost-effective solution", "Focused feature set", "Agile development approach"],
    "standard": ["Comprehensive feature set", "Reliable performance", "Good user experience", "Strong integrations"],
    "enterprise": ["Enterprise-grade security", "Advanced customization", "Dedicated support", "Compliance certifications"],
    "industry-leading": ["Cutting-edge technology", "AI-powered insights", "Market innovation", "Thought leadership"],
}

ML_FEATURES = {
    "crm": ["Lead scoring", "Customer lifetime value prediction", "Churn prediction"],
    "e-commerce": ["Product recommendations", "Dynamic pricing", "Fraud detection"],
    "project-management": ["Task estimation", "Resource allocation", "Risk prediction"],
}
DEFAULT_ML_FEATURES = ["Pattern recognition", "Anomaly detection", "Classification"]

AI_CAPABILITIES = {
    "natural_language_processing": ["Chatbot support", "Document analysis", "Sentiment analysis", "Auto-tagging and categorization"],
    "predictive_analytics": ["Trend analysis", "Forecasting", "Risk assessment", "Performance predictions"],
    "automation": ["Workflow automation", "Smart recommendations", "Auto-prioritization", "Intelligent routing"],
}

IMPLEMENTATION_ROADMAP = {
    "phases": [
        {"phase": 1, "name": "Foundation & Core Features", "duration": "8-12 weeks", "focus": "Core functionality and user management"},
        {"phase": 2, "name": "Advanced Features", "duration": "6-10 weeks", "focus": "Advanced features and integrations"},
        {"phase": 3, "name": "Premium Features & AI", "duration": "8-16 weeks", "focus": "Premium features and AI capabilities"},
        {"phase": 4, "name": "Optimization & Launch", "duration": "4-6 weeks", "focus": "Performance optimization and production launch"},
    ],
    "total_estimated_duration": "26-44 weeks",
    "team_requirements": [
        "Project Manager",
        "Backend Developer (2)",
        "Frontend Developer (2)",
        "UI/UX Designer",
        "DevOps Engineer",
        "QA Engineer",
    ],
}

MARKET_SIZES = {
    "crm": {"size": "$69.8 billion", "growth_rate": "12.1% CAGR"},
    "e-commerce": {"size": "$6.2 trillion", "growth_rate": "11.9% CAGR"},
    "project-management": {"size": "$7.5 billion", "growth_rate": "10.68% CAGR"},
}
DEFAULT_MARKET_SIZE = {"size": "Multi-billion dollar market", "growth_rate": "10%+ CAGR"}

TARGET_MARKET = {
    "primary": "Small to medium businesses",
    "secondary": "Enterprise organizations",
    "geographic": "Global market with focus on North America and Europe",
    "segments": ["Technology companies", "Professional services", "Retail businesses"],
}

COMPETITIVE_LANDSCAPES = {
    "crm": {"leaders": ["Salesforce", "HubSpot"], "challengers": ["Pipedrive", "Zoho"]},
    "e-commerce": {"leaders": ["Shopify", "WooCommerce"], "challengers": ["BigCommerce", "Magento"]},
}
DEFAULT_COMPETITIVE_LANDSCAPE = {"leaders": ["Market Leader 1", "Market Leader 2"], "challengers": ["Challenger 1", "Challenger 2"]}

MARKET_OPPORTUNITIES = [
    "Underserved SMB market",
    "AI-powered features adoption",
    "Mobile-first solutions",
    "Industry-specific customizations",
    "Integration ecosystem expansion",
]

BUSINESS_CASE = {
    "investment_required": {
        "development_cost": "$500K - $2M",
        "marketing_budget": "$200K - $500K",
        "operational_costs": "$100K - $300K annually",
    },
    "revenue_projections": {
        "year_1": "$100K - $500K",
        "year_2": "$500K - $2M",
        "year_3": "$1M - $5M",
    },
    "break_even_timeline": "18-24 months",
    "roi_projections": "200-400% over 3 years",
}

NEXT_STEPS = {
    "immediate_actions": [
        "Market validation and user research",
        "Technical feasibility assessment",
        "Team assembly and planning",
        "Initial wireframes and prototypes",
    ],
    "short_term_goals": [
        "MVP development (3-6 months)",
        "Beta testing with select users",
        "Initial market launch",
        "Feedback collection and iteration",
    ],
    "long_term_strategy": [
        "Feature expansion based on user feedback",
        "Market expansion and scaling",
        "Partnership and integration development",
        "Advanced feature development (AI, etc.)",
    ],
}
