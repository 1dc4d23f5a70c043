# Paramètres de jeu (règles fixes du zoo)

# --- Calendrier ---
MAX_DAYS = 30  # Durée d'une partie (jours)
FREE_MARKET_DAYS = 10  # Jusqu'à ce jour : rafraîchissement du marché gratuit, achats illimités
MAX_PURCHASES_PER_DAY = 1  # Après FREE_MARKET_DAYS

# --- Marché aux animaux ---
MARKET_SIZE = 10
MARKET_REFRESH_COST = 150
SELL_PRICE_RATIO = 0.8  # Revente à 80 % du prix
MARKET_AGE_RANGE = (1, 20)  # jours
MARKET_WEIGHT_RANGE = (5, 100)  # kg

# --- Visiteurs & popularité ---
INITIAL_POPULARITY = 50
VISITORS_PER_POPULARITY = 2
COST_PER_POPULARITY = 20  # Campagne de pub : 20 pièces = +1 popularité
POPULARITY_DRIFT_RATIO = 0.1

# --- Nourriture ---
FOOD_PRICE_PER_KG = 2
FOOD_PER_ANIMAL = 1  # kg / animal / jour

# --- Vieillesse ---
OLD_AGE_THRESHOLD = 60  # jours ; au-delà, (âge - 60) % de risque par jour

# --- Maladie (virus) ---
INFECTION_CHANCE = 30  # %
SPREAD_CHANCE = 30  # %
SPREAD_PER_ANIMAL = 2
VIRUS_DEATH_CHANCE = 50  # %
CURE_COST = 30

# --- Famine ---
STARVATION_DEATH_CHANCE = 50  # %

# --- Événements aléatoires ---
EVENT_PROBABILITY = 20  # %

# --- Reproduction ---
BREEDING_MIN_AGE = 5  # strictement supérieur
TWINS_CHANCE = 10  # %
OFFSPRING_AGE = 1

# --- Enclos ---
MAX_ENCLOSURE_LEVEL = 3
ENCLOSURE_MIN_COST = 150
ENCLOSURE_BASE_COST = 100
ENCLOSURE_COST_PER_SLOT = 10
ENCLOSURE_COST_PER_CLIMATE = 50
ENCLOSURE_MIN_DAILY_COST = 10
ENCLOSURE_BASE_DAILY_COST = 10
ENCLOSURE_DAILY_COST_PER_CLIMATE = 5
ENCLOSURE_DAILY_COST_PER_AQUATIC = 10
UPGRADE_COST_PER_SLOT = 5

# --- Prix des animaux ---
ANIMAL_BASE_PRICE = 60
ANIMAL_MIN_PRICE = 10
ANIMAL_PRICE_PER_KG = 2
ANIMAL_AGE_DISCOUNT = 5  # par tranche de 30 jours
CARNIVORE_PREMIUM = 100
CLIMATE_PREMIUM = 50
AQUATIC_PREMIUM = 200
