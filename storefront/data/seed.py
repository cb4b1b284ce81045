"""Starter catalog used when no catalog file is configured."""

DEFAULT_PRODUCTS = [
    {
        "id": 1,
        "name": "Industrial Circuit Breaker Series",
        "brand": "siemens",
        "category": "electrical",
        "price": 459,
        "description": "High-performance molded case circuit breakers designed for industrial applications with advanced protection features and remote monitoring capabilities.",
        "inStock": True,
        "featured": True,
        "specifications": {"voltage": "600V", "current": "100A", "poles": "3", "interrupting": "65kA"},
    },
    {
        "id": 2,
        "name": "CompactLogix PLC System",
        "brand": "rockwell",
        "category": "automation",
        "price": 3299,
        "description": "Scalable programmable logic controller with integrated motion, safety, and information solutions for complex industrial automation applications.",
        "inStock": True,
        "featured": True,
        "specifications": {"io": "32 Digital I/O", "memory": "2MB", "ethernet": "Yes", "safety": "Integrated"},
    },
    {
        "id": 3,
        "name": "MasterPact Power Distribution Panel",
        "brand": "schneider",
        "category": "power",
        "price": 8750,
        "description": "Advanced power distribution solution with digital monitoring, predictive maintenance, and comprehensive protection for critical infrastructure.",
        "inStock": True,
        "featured": False,
        "specifications": {"voltage": "480V", "current": "4000A", "protection": "Digital", "monitoring": "IoT Ready"},
    },
    {
        "id": 4,
        "name": "ACS880 Industrial Drive",
        "brand": "abb",
        "category": "industrial",
        "price": 2150,
        "description": "Ultra-low harmonic drives designed for demanding industrial processes with built-in safety functions and energy optimization features.",
        "inStock": True,
        "featured": True,
        "specifications": {"power": "75kW", "voltage": "480V", "harmonic": "< 3%", "efficiency": "> 97%"},
    },
    {
        "id": 5,
        "name": "Emergency Safety System",
        "brand": "eaton",
        "category": "safety",
        "price": 875,
        "description": "Comprehensive emergency stop and safety monitoring system with redundant circuits and diagnostic capabilities for industrial machinery.",
        "inStock": True,
        "featured": False,
        "specifications": {"category": "Category 4", "response": "< 500ms", "outputs": "8 Safety", "communication": "EtherNet/IP"},
    },
    {
        "id": 6,
        "name": "Industrial LED Lighting System",
        "brand": "ge",
        "category": "electrical",
        "price": 320,
        "description": "Energy-efficient LED lighting solution designed for harsh industrial environments with intelligent controls and maintenance alerts.",
        "inStock": True,
        "featured": False,
        "specifications": {"lumens": "15000lm", "efficiency": "150lm/W", "lifespan": "100,000hr", "protection": "IP66"},
    },
]
