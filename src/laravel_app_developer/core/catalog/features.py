"""Static feature pools used by the suggestion engine."""

from __future__ import annotations

ESSENTIAL_FEATURES: dict[str, list[dict]] = {
    "crm": [
        {"name": "Contact Management", "description": "Store and organize customer contact information", "effort": "low"},
        {"name": "Lead Tracking", "description": "Track potential customers through sales pipeline", "effort": "medium"},
        {"name": "Task Management", "description": "Create and assign tasks to team members", "effort": "low"},
        {"name": "Email Integration", "description": "Send and track emails from within the CRM", "effort": "medium"},
        {"name": "Reporting Dashboard", "description": "Visual dashboards showing key metrics", "effort": "medium"},
    ],
    "e-commerce": [
        {"name": "Product Catalog", "description": "Display products with images and descriptions", "effort": "low"},
        {"name": "Shopping Cart", "description": "Add products to cart and manage quantities", "effort": "low"},
        {"name": "Payment Processing", "description": "Secure payment gateway integration", "effort": "medium"},
        {"name": "Order Management", "description": "Track and manage customer orders", "effort": "medium"},
        {"name": "Inventory Management", "description": "Track product stock levels", "effort": "medium"},
    ],
    "project-management": [
        {"name": "Task Creation", "description": "Create and assign tasks to team members", "effort": "low"},
        {"name": "Project Timeline", "description": "Visual project timelines and Gantt charts", "effort": "medium"},
        {"name": "Team Collaboration", "description": "Communication and file sharing tools", "effort": "medium"},
        {"name": "Time Tracking", "description": "Track time spent on tasks and projects", "effort": "low"},
        {"name": "Progress Reporting", "description": "Track and report project progress", "effort": "medium"},
    ],
}

DEFAULT_ESSENTIAL_FEATURES = [
    {"name": "User Authentication", "description": "Secure user login and registration", "effort": "low"},
    {"name": "User Dashboard", "description": "Personalized user dashboard", "effort": "medium"},
    {"name": "Basic Reporting", "description": "Generate basic usage reports", "effort": "medium"},
]

COMPETITIVE_FEATURES: dict[str, list[dict]] = {
    "crm": [
        {"name": "Sales Automation", "description": "Automate repetitive sales tasks", "effort": "high", "market_adoption": 75},
        {"name": "Advanced Analytics", "description": "Detailed sales performance analytics", "effort": "high", "market_adoption": 68},
        {"name": "Mobile App", "description": "Native mobile application", "effort": "high", "market_adoption": 82},
        {"name": "Social Media Integration", "description": "Connect with social media platforms", "effort": "medium", "market_adoption": 45},
    ],
    "e-commerce": [
        {"name": "Product Recommendations", "description": "AI-powered product suggestions", "effort": "high", "market_adoption": 78},
        {"name": "Multi-channel Support", "description": "Sell across multiple platforms", "effort": "high", "market_adoption": 65},
        {"name": "Advanced Search", "description": "Sophisticated product search and filters", "effort": "medium", "market_adoption": 85},
        {"name": "Customer Reviews", "description": "Product review and rating system", "effort": "medium", "market_adoption": 92},
    ],
    "project-management": [
        {"name": "Agile Boards", "description": "Kanban and Scrum board views", "effort": "medium", "market_adoption": 78},
        {"name": "Resource Management", "description": "Manage team resources and capacity", "effort": "high", "market_adoption": 62},
        {"name": "Integration Hub", "description": "Connect with popular development tools", "effort": "high", "market_adoption": 71},
        {"name": "Custom Workflows", "description": "Create custom project workflows", "effort": "high", "market_adoption": 58},
    ],
}

INNOVATION_OPPORTUNITIES: dict[str, dict[str, list[dict]]] = {
    "crm": {
        "startup": [
            {"name": "AI Lead Scoring", "description": "Machine learning to automatically score leads", "effort": "high", "impact": "high", "rationale": "Differentiates from basic CRM solutions"},
            {"name": "Video Messaging", "description": "Send personalized video messages to prospects", "effort": "medium", "impact": "medium", "rationale": "Personal touch in digital communication"},
        ],
        "growth": [
            {"name": "Predictive Analytics", "description": "Predict customer behavior and churn risk", "effort": "very_high", "impact": "very_high", "rationale": "Advanced feature for competitive advantage"},
            {"name": "Conversation Intelligence", "description": "AI analysis of sales calls and meetings", "effort": "very_high", "impact": "high", "rationale": "Emerging trend in sales technology"},
        ],
    },
    "e-commerce": {
        "startup": [
            {"name": "Visual Search", "description": "Search products using images", "effort": "high", "impact": "medium", "rationale": "Innovative search experience"},
            {"name": "AR Try-On", "description": "Augmented reality product try-on", "effort": "very_high", "impact": "medium", "rationale": "Reduces return rates and improves customer experience"},
        ],
        "growth": [
            {"name": "Dynamic Pricing", "description": "AI-powered dynamic pricing optimization", "effort": "high", "impact": "high", "rationale": "Maximizes revenue and competitiveness"},
            {"name": "Sustainability Tracking", "description": "Track and display product environmental impact", "effort": "medium", "impact": "medium", "rationale": "Growing consumer environmental consciousness"},
        ],
    },
}

DEFAULT_INNOVATIONS = [
    {"name": "AI-Powered Automation", "description": "Intelligent automation of routine tasks", "effort": "high", "impact": "high", "rationale": "Improves efficiency and reduces manual work"},
]

UX_IMPROVEMENTS = [
    {"name": "Advanced Search and Filtering", "description": "Implement comprehensive search with filters, sorting, and auto-complete", "effort": "medium", "impact": "high", "rationale": "Improves user productivity and reduces time to find information"},
    {"name": "Customizable Dashboard", "description": "Allow users to customize their dashboard layout and widgets", "effort": "medium", "impact": "medium", "rationale": "Personalizes user experience and improves engagement"},
    {"name": "Keyboard Shortcuts", "description": "Add keyboard shortcuts for power users", "effort": "low", "impact": "medium", "rationale": "Significantly improves efficiency for frequent users"},
    {"name": "Dark Mode", "description": "Implement dark mode theme option", "effort": "low", "impact": "medium", "rationale": "Modern user expectation, reduces eye strain"},
    {"name": "Progressive Web App (PWA)", "description": "Convert to PWA for mobile app-like experience", "effort": "medium", "impact": "high", "rationale": "Improves mobile experience and allows offline functionality"},
]

REVENUE_FEATURES = [
    {"name": "Advanced Analytics and Reporting", "description": "Comprehensive analytics dashboard with custom reports", "effort": "high", "impact": "high", "rationale": "Premium feature that justifies higher pricing tiers"},
    {"name": "API Access and Integrations", "description": "REST API with webhook support and integration marketplace", "effort": "medium", "impact": "high", "rationale": "Increases customer stickiness and enables partner ecosystem"},
    {"name": "White-label Solution", "description": "Allow customers to brand the application as their own", "effort": "medium", "impact": "high", "rationale": "Opens new B2B revenue streams and higher-value contracts"},
    {"name": "Advanced User Management", "description": "Teams, roles, permissions, and user hierarchies", "effort": "medium", "impact": "medium", "rationale": "Enables enterprise sales and higher-tier subscriptions"},
    {"name": "Audit Logs and Compliance", "description": "Comprehensive audit trails and compliance reporting", "effort": "medium", "impact": "medium", "rationale": "Required for enterprise customers and regulated industries"},
]

TREND_FEATURES = [
    {"name": "AI-Powered Insights", "description": "Machine learning algorithms to provide predictive insights", "effort": "high", "impact": "very_high", "rationale": "AI is becoming essential for competitive advantage", "trend": "artificial_intelligence"},
    {"name": "Voice Interface", "description": "Voice commands and voice-to-text functionality", "effort": "medium", "impact": "medium", "rationale": "Voice interfaces are becoming more mainstream", "trend": "voice_technology"},
    {"name": "Blockchain Integration", "description": "Blockchain-based verification and smart contracts", "effort": "very_high", "impact": "medium", "rationale": "Blockchain offers trust and transparency benefits", "trend": "blockchain"},
    {"name": "AR/VR Features", "description": "Augmented or virtual reality experiences", "effort": "very_high", "impact": "low", "rationale": "Emerging technology for immersive experiences", "trend": "ar_vr"},
    {"name": "IoT Integration", "description": "Connect with Internet of Things devices", "effort": "high", "impact": "medium", "rationale": "IoT ecosystem integration creates new value propositions", "trend": "iot"},
    {"name": "Real-time Collaboration", "description": "Real-time multi-user editing and collaboration features", "effort": "high", "impact": "high", "rationale": "Remote work trends drive demand for collaboration tools", "trend": "remote_work"},
]

MARKET_TRENDS: dict[str, list[str]] = {
    "crm": [
        "AI and automation adoption increasing",
        "Mobile-first approach becoming standard",
        "Integration ecosystems gaining importance",
        "Personalization and customization in demand",
    ],
    "e-commerce": [
        "Voice commerce growing rapidly",
        "Sustainability features increasingly important",
        "Social commerce integration trending",
        "AR/VR experiences becoming mainstream",
    ],
}

DEFAULT_MARKET_TRENDS = [
    "User experience prioritization",
    "API-first architectures",
    "Real-time collaboration features",
    "AI-powered insights and automation",
]

USER_EXPECTATIONS = [
    "Intuitive and responsive user interface",
    "Mobile accessibility and responsiveness",
    "Fast performance and minimal loading times",
    "Comprehensive search and filtering capabilities",
    "Real-time updates and notifications",
    "Integration with existing tools and workflows",
]

TECHNOLOGY_SHIFTS = [
    "Cloud-first architecture adoption",
    "AI and machine learning integration",
    "API-driven development approach",
    "Progressive Web App (PWA) adoption",
    "Microservices architecture popularity",
    "Real-time communication expectations",
]

COMPETITIVE_PRESSURES = [
    "Increased feature expectations from users",
    "Pressure to provide mobile-first experiences",
    "Need for seamless integrations",
    "Demand for advanced analytics and reporting",
    "Competition from AI-powered solutions",
    "User demand for customization and flexibility",
]
