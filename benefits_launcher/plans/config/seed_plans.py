"""
Sample carrier catalogue inserted by `flask seed-plans`.
Monthly cost in cents.
"""



SEED_PLANS = [
    {
        "carrier": "Anthem",
        "name": "Anthem Silver PPO 2000/20%",
        "type": "PPO",
        "network": "Prudent Buyer PPO",
        "monthly_cost": 34580,
        "details": "Network: Prudent Buyer PPO",
        "metal_tier": "Silver"
    },
    {
        "carrier": "Anthem",
        "name": "Anthem Gold HMO 25/500",
        "type": "HMO",
        "network": "California Care HMO",
        "monthly_cost": 45625,
        "details": "Primary coverage for most general health needs",
        "metal_tier": "Gold"
    },
    {
        "carrier": "Anthem",
        "name": "Anthem Platinum PPO 250/10%",
        "type": "PPO",
        "network": "Prudent Buyer PPO",
        "monthly_cost": 58740,
        "details": "Network: Prudent Buyer PPO",
        "metal_tier": "Platinum"
    },
    {
        "carrier": "Blue Shield",
        "name": "Blue Shield Gold PPO 500/30",
        "type": "PPO",
        "network": "Full PPO Network",
        "monthly_cost": 47890,
        "details": "Comprehensive coverage with low deductible",
        "metal_tier": "Gold"
    },
    {
        "carrier": "Blue Shield",
        "name": "Blue Shield Silver PPO 1700/40",
        "type": "PPO",
        "network": "Full PPO Network",
        "monthly_cost": 39250,
        "details": "Balanced coverage for everyday needs",
        "metal_tier": "Silver"
    },
    {
        "carrier": "CCSB",
        "name": "CCSB Bronze HDHP 7000/0%",
        "type": "HSA",
        "network": "CCSB Network",
        "monthly_cost": 28500,
        "details": "HSA-compatible plan with low premium",
        "metal_tier": "Bronze"
    },
    {
        "carrier": "CCSB",
        "name": "CCSB Silver HMO 55/2250",
        "type": "HMO",
        "network": "CCSB Network",
        "monthly_cost": 37840,
        "details": "Cost-effective option for small businesses",
        "metal_tier": "Silver"
    }
]

# Defaults for columns a plan upload leaves out
UPLOAD_DEFAULT_TYPE = "PPO"
UPLOAD_DEFAULT_NETWORK = "Standard"
UPLOAD_DEFAULT_METAL_TIER = "Silver"
