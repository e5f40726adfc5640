from typing import Literal, get_args

GENDER_OPTIONS = ["Female", "Male", "Non-binary"]

EXPRESSION_OPTIONS = [
    "Soft smile", "Laughing", "Serious", "Thoughtful", "Confident",
    "Playful", "Pensive", "Surprised", "Calm", "Mysterious"
]

BODY_SHAPE_OPTIONS = [
    "Slim", "Athletic", "Average", "Curvy", "Hourglass",
    "Petite", "Plus-size", "Muscular", "Tall and lean"
]

LIGHTING_OPTIONS = [
    "Soft window light", "Golden hour sunlight", "Overcast daylight",
    "Warm tungsten lamp light", "Neon city lights", "Harsh midday sun",
    "Candlelight", "Blue hour twilight", "Mixed indoor lighting"
]

MOOD_OPTIONS = [
    "Relaxed", "Joyful", "Melancholic", "Intimate", "Energetic",
    "Nostalgic", "Dreamy", "Serene", "Moody"
]

SHOT_TYPE_OPTIONS = ["Close-up", "Medium shot", "Full body", "Wide shot", "Over the shoulder"]

SHOT_TYPE_DESCRIPTIONS = {
    "Close-up": "tight close-up portrait framing the face and shoulders",
    "Medium shot": "medium shot framing the subject from the waist up",
    "Full body": "full-body shot showing the subject from head to toe",
    "Wide shot": "wide environmental shot where the subject is small within the scene",
    "Over the shoulder": "over-the-shoulder shot with the subject partly turned away from the camera"
}

ETHNICITY_FEATURES_MAP = {
    "Japan": "East Asian features typical of Japan: straight dark hair, dark brown eyes with a single or low double eyelid, light to medium skin with warm or neutral undertones.",
    "South Korea": "East Asian features typical of Korea: straight black hair, dark brown monolid or subtle double-lid eyes, fair to light skin with neutral undertones.",
    "China": "East Asian features typical of China: straight black hair, dark brown almond eyes, light to medium skin with warm undertones, broad range of face shapes.",
    "Vietnam": "Southeast Asian features typical of Vietnam: straight black hair, dark brown eyes, light tan to medium skin with golden undertones, softer facial contours.",
    "Thailand": "Southeast Asian features typical of Thailand: black hair, dark brown eyes, medium tan skin with golden undertones, rounded facial features.",
    "Indonesia": "Southeast Asian features typical of Indonesia: black wavy or straight hair, dark brown eyes, medium brown skin with warm undertones.",
    "Philippines": "Southeast Asian features typical of the Philippines: black hair, dark brown eyes, light brown to tan skin, broad nose bridge and rounded face.",
    "India": "South Asian features typical of India: thick dark hair, dark brown eyes, light brown to deep brown skin with warm undertones, defined brows.",
    "Nigeria": "West African features typical of Nigeria: tightly coiled black hair, dark brown eyes, deep brown skin with warm undertones, full lips, broad nose.",
    "Kenya": "East African features typical of Kenya: short coily black hair, dark brown eyes, deep brown skin, high cheekbones and slender facial structure.",
    "Ethiopia": "East African features typical of Ethiopia: curly to coily dark hair, large dark brown eyes, brown skin with warm undertones, narrow nose and defined cheekbones.",
    "Egypt": "North African features typical of Egypt: dark wavy hair, dark brown eyes, olive to light brown skin, strong brows.",
    "Morocco": "North African features typical of Morocco: dark curly or wavy hair, brown or hazel eyes, olive to light brown skin.",
    "Turkey": "Anatolian features typical of Turkey: dark brown hair, brown or hazel eyes, light olive skin, defined brows and nose.",
    "Iran": "Persian features typical of Iran: thick dark hair, dark brown or hazel eyes, light olive skin, prominent brows and defined nose.",
    "Brazil": "Highly diverse Brazilian features: mixed European, African and Indigenous ancestry, skin from light olive to deep brown, hair from wavy to coily.",
    "Mexico": "Mestizo features typical of Mexico: dark brown hair, brown eyes, light brown to medium tan skin with warm undertones.",
    "Peru": "Andean features typical of Peru: straight black hair, dark brown eyes, medium brown skin, high cheekbones.",
    "United States": "Diverse features reflecting the multi-ethnic population of the United States; any ethnicity is appropriate, chosen uniquely per image.",
    "United Kingdom": "Northern European features typical of the UK: fair skin, light brown to dark brown hair, blue, green or brown eyes, varied freckles.",
    "France": "Western European features typical of France: fair to light olive skin, brown hair, brown or hazel eyes.",
    "Italy": "Southern European features typical of Italy: olive skin, dark brown wavy hair, brown eyes, defined nose.",
    "Spain": "Southern European features typical of Spain: light olive skin, dark brown hair, brown eyes.",
    "Germany": "Central European features typical of Germany: fair skin, blond to brown hair, blue, grey or brown eyes.",
    "Sweden": "Nordic features typical of Sweden: very fair skin, blond or light brown hair, blue or grey eyes.",
    "Poland": "Eastern European features typical of Poland: fair skin, light brown or dark blond hair, blue or grey eyes, broad cheekbones.",
    "Russia": "Eastern European features typical of Russia: fair skin, light brown to dark hair, blue, grey or green eyes, high cheekbones.",
    "Ukraine": "Eastern European features typical of Ukraine: fair skin, light to dark brown hair, blue, green or brown eyes.",
    "Australia": "Diverse features reflecting the population of Australia, most commonly fair, sun-touched skin with light to dark brown hair.",
}

SENSUAL_POSES = [
    "Lying on a bed propped up on one elbow, looking at the camera",
    "Sitting on the edge of a bathtub, legs crossed, leaning slightly back",
    "Standing against a window frame, one arm raised above the head",
    "Kneeling on a rumpled bed sheet, glancing over the shoulder",
    "Reclining on a sofa with one knee bent",
    "Leaning against a doorway with hips turned toward the camera"
]

NON_SENSUAL_POSES = [
    "Sitting at a cafe table holding a cup with both hands",
    "Walking toward the camera mid-stride",
    "Leaning on a balcony railing looking into the distance",
    "Sitting cross-legged on the floor reading a book",
    "Standing in a doorway with hands in pockets",
    "Crouching down to tie a shoelace",
    "Laughing while adjusting their hair"
]

MODERN_OUTFITS = [
    "Oversized linen shirt with wide-leg trousers",
    "Cropped knit cardigan over a slip dress",
    "Tailored blazer with a plain white t-shirt and straight jeans",
    "Ribbed turtleneck with a pleated midi skirt",
    "Technical windbreaker with cargo pants",
    "Minimalist satin shirt dress"
]

AUTHENTIC_OUTFITS = [
    "Faded cotton t-shirt and worn jeans",
    "Hand-knitted sweater with corduroy trousers",
    "Simple printed house dress",
    "Work overalls over a long-sleeve shirt",
    "Traditional regional garment worn for everyday errands",
    "Sweatshirt with a local sports team logo and track pants"
]

SENSUAL_OUTFITS = [
    "Silk camisole with matching shorts",
    "Oversized button-up shirt worn loosely",
    "Lace-trimmed slip dress",
    "Fitted bodysuit with high-waisted trousers",
    "Soft knit off-shoulder top",
    "Satin robe loosely tied at the waist"
]

RANDOM_DESCRIPTIONS = [
    "Wavy shoulder-length hair, a small scar above the left eyebrow",
    "Short cropped hair, light freckles across the nose",
    "Long straight hair tied in a loose ponytail, thick eyebrows",
    "Curly hair pulled into a bun, round glasses",
    "Buzz cut, a faint stubble, laugh lines around the eyes",
    "Braided hair, a beauty mark near the lip"
]

RANDOM_TONES = [
    "Warm brown skin, dark brown hair, deep brown eyes",
    "Fair skin with pink undertones, light brown hair, grey eyes",
    "Olive skin, black hair, hazel eyes",
    "Golden tan skin, chestnut hair, amber eyes",
    "Deep brown skin, black hair, dark eyes",
    "Light skin with freckles, auburn hair, green eyes"
]

RANDOM_LOCATIONS = [
    "A cramped apartment kitchen",
    "A neighborhood laundromat",
    "A rooftop with drying laundry",
    "A bus stop on a rainy street",
    "A small family-run corner shop",
    "A living room with mismatched furniture",
    "A public park bench near a pond"
]

RANDOM_DETAILS = [
    "Dishes stacked in the sink, a calendar pinned to the wall",
    "Flickering fluorescent tube, faded posters on the walls",
    "Potted plants with a few dry leaves, a plastic chair",
    "Rain-streaked glass, a crumpled receipt on the floor",
    "A humming old refrigerator covered in magnets",
    "Worn rug, a television playing in the background"
]

RANDOM_COLORS = [
    "Red", "Navy blue", "Emerald green", "Mustard yellow", "Black",
    "White", "Burgundy", "Sky blue", "Beige", "Olive"
]

SCENE_PRESETS = {
    "grandmas_kitchen": {
        "location": "Grandma's kitchen",
        "details": "Old stove, a pot simmering, family photos on the fridge"
    },
    "morning_commute": {
        "location": "A crowded morning commuter train",
        "details": "Passengers holding straps, ads above the windows, phone screens glowing"
    },
    "student_bedroom": {
        "location": "A student's bedroom",
        "details": "Unmade bed, textbooks stacked on a desk, fairy lights on the wall"
    },
    "street_market": {
        "location": "A local street market",
        "details": "Vendors calling out prices, stacked produce crates, plastic awnings"
    },
    "office_break": {
        "location": "A small office break room",
        "details": "Coffee machine, a shared fridge with notes, mismatched mugs"
    }
}

AspectRatio = Literal["1:1", "3:4", "9:16"]
ImageCount = Literal[1, 4]
GenerationTier = Literal["premium", "standard"]
OverallStyle = Literal["modern", "authentic"]
ModelType = Literal["professional", "natural"]
SceneType = Literal["any", "indoor"]

ASPECT_RATIOS = get_args(AspectRatio)
IMAGE_COUNTS = get_args(ImageCount)
GENERATION_TIERS = get_args(GenerationTier)
OVERALL_STYLES = get_args(OverallStyle)
MODEL_TYPES = get_args(ModelType)
SCENE_TYPES = get_args(SceneType)

AGE_RANGE = (18, 60)

DEFAULT_ETHNIC_FEATURES = "A diverse range of human features."
