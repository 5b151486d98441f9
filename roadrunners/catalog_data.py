# roadrunners/catalog_data.py

"""
Starter catalog written by POST /seed on an empty store.
Tours, fleet advisory entries and pit-stops live here so that the
content can be edited without touching the services.
"""

SEED_MARKER_KEY = "tours_seeded_v2"

TOURS_CATALOG = [
    {
        "slug": "ladakh-odyssey",
        "title": "LADAKH ODYSSEY",
        "subtitle": "Manali to Leh via Khardung La",
        "description": "The ultimate high-altitude expedition through the roof of the world. Cross the highest motorable passes, navigate treacherous Gata Loops, and witness landscapes that defy imagination. This 12-day odyssey pushes rider and machine to the absolute limit.",
        "difficulty": "EXTREME",
        "duration": 12,
        "terrain": "HIGH-ALTITUDE",
        "price": 45000,
        "maxGroupSize": 12,
        "nextDeparture": "2026-06-15",
        "image": "https://images.unsplash.com/photo-1652531685884-e46aaa8ad66f?w=800&q=80",
        "elevation": {"min": 1950, "max": 5602},
        "shadowFleet": [
            "Backup Royal Enfield Himalayan 450",
            "Chase SUV with spares",
            "Satellite phone",
            "Portable oxygen concentrator",
            "Full first-aid trauma kit",
            "Emergency evacuation plan",
        ],
        "itinerary": [
            {"day": 1, "title": "Arrival in Manali", "description": "Acclimatization day. Bike inspection, gear check, and team briefing at base camp. Evening ride through Old Manali.", "elevation": 2050, "distance": 15},
            {"day": 2, "title": "Manali to Jispa", "description": "Cross the Atal Tunnel and ride through Lahaul Valley. First taste of mountain roads.", "elevation": 3200, "distance": 140},
            {"day": 3, "title": "Jispa to Sarchu", "description": "Navigate the legendary 21 Gata Loops. Altitude sickness protocols in effect.", "elevation": 4290, "distance": 85},
            {"day": 4, "title": "Sarchu to Leh", "description": "Cross Lachalung La and Tanglang La. Descent into the Indus Valley. Arrival in Leh.", "elevation": 3500, "distance": 260},
            {"day": 5, "title": "Leh Rest Day", "description": "Acclimatization in Leh. Visit Leh Palace, Shanti Stupa. Bike service and prep.", "elevation": 3500, "distance": 20},
            {"day": 6, "title": "Leh to Nubra Valley", "description": "Summit Khardung La (5,602m). Descent to Nubra Valley. Sand dunes and double-humped camels.", "elevation": 5602, "distance": 120},
            {"day": 7, "title": "Nubra Valley to Pangong", "description": "Ride through Shyok Valley to the surreal Pangong Tso lake. Camp by the shore.", "elevation": 4350, "distance": 150},
            {"day": 8, "title": "Pangong to Hanle", "description": "Remote riding through Chang La. Visit the Hanle Observatory, one of the highest in the world.", "elevation": 4500, "distance": 160},
            {"day": 9, "title": "Hanle to Tso Moriri", "description": "Off-road through nomadic lands. Camp beside the pristine Tso Moriri lake.", "elevation": 4522, "distance": 180},
            {"day": 10, "title": "Tso Moriri to Pang", "description": "Ride through More Plains - the highest plateau in India. Wild landscapes.", "elevation": 4600, "distance": 140},
            {"day": 11, "title": "Pang to Manali", "description": "Full send back through all major passes. Longest riding day. Victory ride into Manali.", "elevation": 2050, "distance": 320},
            {"day": 12, "title": "Departure", "description": "Farewell breakfast. Certificate ceremony. Departure.", "elevation": 2050, "distance": 0},
        ],
    },
    {
        "slug": "spiti-circuit",
        "title": "SPITI CIRCUIT",
        "subtitle": "The Middle Land - Shimla to Manali Loop",
        "description": "Explore the ancient Buddhist kingdom of Spiti, where time stands still and the roads challenge every ounce of your riding skill. Monasteries perched on cliffs, fossil-rich valleys, and the treacherous Kunzum Pass await.",
        "difficulty": "HARD",
        "duration": 10,
        "terrain": "MOUNTAIN",
        "price": 38000,
        "maxGroupSize": 10,
        "nextDeparture": "2026-07-01",
        "image": "https://images.unsplash.com/photo-1734699865526-efcc499ff560?w=800&q=80",
        "elevation": {"min": 2200, "max": 4590},
        "shadowFleet": [
            "Backup Himalayan 450",
            "Chase vehicle",
            "Satellite phone",
            "First-aid kit",
            "Portable oxygen",
        ],
        "itinerary": [
            {"day": 1, "title": "Shimla Assembly", "description": "Team meeting and briefing. Ride through colonial hill station.", "elevation": 2200, "distance": 0},
            {"day": 2, "title": "Shimla to Sarahan", "description": "Ride through pine forests to the Bhimakali Temple.", "elevation": 2400, "distance": 175},
            {"day": 3, "title": "Sarahan to Sangla", "description": "Enter the Kinnaur Valley. Apple orchards and wooden villages.", "elevation": 2680, "distance": 95},
            {"day": 4, "title": "Sangla to Chitkul", "description": "Ride to the last inhabited village before Tibet.", "elevation": 3450, "distance": 30},
            {"day": 5, "title": "Chitkul to Kalpa", "description": "Views of the Kinnaur Kailash range. Sacred mountain territory.", "elevation": 2960, "distance": 80},
            {"day": 6, "title": "Kalpa to Tabo", "description": "Enter Spiti. Visit the 1000-year-old Tabo Monastery.", "elevation": 3280, "distance": 170},
            {"day": 7, "title": "Tabo to Kaza", "description": "The heart of Spiti. Visit Key Monastery and Kibber village.", "elevation": 3640, "distance": 50},
            {"day": 8, "title": "Kaza to Chandratal", "description": "Cross Kunzum Pass. Camp at the Moon Lake.", "elevation": 4300, "distance": 80},
            {"day": 9, "title": "Chandratal to Manali", "description": "Gravel roads through Rohtang. Descent into Kullu Valley.", "elevation": 2050, "distance": 110},
            {"day": 10, "title": "Departure", "description": "Farewell and departure from Manali.", "elevation": 2050, "distance": 0},
        ],
    },
    {
        "slug": "rajasthan-desert-run",
        "title": "RAJASTHAN DESERT RUN",
        "subtitle": "Jaipur to Jaisalmer - The Golden Trail",
        "description": "A sun-scorched, sand-blasted expedition through the Thar Desert. Ride past ornate havelis, massive forts, and endless dunes. This is not altitude; this is heat, grit, and the raw beauty of Rajasthan.",
        "difficulty": "MODERATE",
        "duration": 8,
        "terrain": "DESERT",
        "price": 32000,
        "maxGroupSize": 14,
        "nextDeparture": "2026-10-15",
        "image": "https://images.unsplash.com/photo-1697464026024-046547ebd141?w=800&q=80",
        "elevation": {"min": 210, "max": 580},
        "shadowFleet": [
            "Backup motorcycle",
            "Chase SUV with water supply",
            "First-aid kit",
            "GPS tracker per rider",
        ],
        "itinerary": [
            {"day": 1, "title": "Jaipur Assembly", "description": "Pink City tour. Bike allocation and briefing.", "elevation": 430, "distance": 0},
            {"day": 2, "title": "Jaipur to Pushkar", "description": "Ride to the holy lake city. Visit Brahma Temple.", "elevation": 510, "distance": 150},
            {"day": 3, "title": "Pushkar to Jodhpur", "description": "Enter the Blue City. Explore Mehrangarh Fort.", "elevation": 231, "distance": 185},
            {"day": 4, "title": "Jodhpur to Jaisalmer", "description": "Deep into the Thar. Golden City awaits.", "elevation": 225, "distance": 285},
            {"day": 5, "title": "Jaisalmer Dunes", "description": "Sam Sand Dunes ride. Sunset in the desert.", "elevation": 210, "distance": 45},
            {"day": 6, "title": "Jaisalmer to Bikaner", "description": "Cross the desert. Junagarh Fort visit.", "elevation": 242, "distance": 330},
            {"day": 7, "title": "Bikaner to Jaipur", "description": "Return ride. Victory dinner.", "elevation": 430, "distance": 330},
            {"day": 8, "title": "Departure", "description": "Farewell breakfast and departure.", "elevation": 430, "distance": 0},
        ],
    },
    {
        "slug": "meghalaya-expedition",
        "title": "MEGHALAYA EXPEDITION",
        "subtitle": "The Abode of Clouds - Northeast Frontier",
        "description": "Venture into India's wettest region. Ride through living root bridges, waterfalls that cascade off cloud-wrapped cliffs, and roads carved through the densest jungles. Requires Inner Line Permits and nerves of steel.",
        "difficulty": "HARD",
        "duration": 9,
        "terrain": "JUNGLE",
        "price": 40000,
        "maxGroupSize": 8,
        "nextDeparture": "2026-09-01",
        "image": "https://images.unsplash.com/photo-1717920961672-a701efb8896e?w=800&q=80",
        "elevation": {"min": 30, "max": 1960},
        "shadowFleet": [
            "Backup Xpulse 200",
            "Chase vehicle",
            "Waterproof gear for every rider",
            "Satellite phone",
            "First-aid kit",
        ],
        "itinerary": [
            {"day": 1, "title": "Guwahati Assembly", "description": "Team briefing. Northeast orientation.", "elevation": 55, "distance": 0},
            {"day": 2, "title": "Guwahati to Shillong", "description": "Enter Meghalaya. Ride to the capital.", "elevation": 1496, "distance": 100},
            {"day": 3, "title": "Shillong to Cherrapunji", "description": "Wettest place on Earth. Nohkalikai Falls.", "elevation": 1484, "distance": 55},
            {"day": 4, "title": "Cherrapunji Trek Day", "description": "Trek to living root bridges. Rest day for bikes.", "elevation": 1484, "distance": 0},
            {"day": 5, "title": "Cherrapunji to Dawki", "description": "Crystal clear Umngot River. Bangladesh border.", "elevation": 80, "distance": 95},
            {"day": 6, "title": "Dawki to Tura", "description": "Cross the Garo Hills. Dense jungle riding.", "elevation": 340, "distance": 280},
            {"day": 7, "title": "Tura to Balpakram", "description": "Explore the Land of Spirits. Canyon riding.", "elevation": 900, "distance": 60},
            {"day": 8, "title": "Balpakram to Guwahati", "description": "Return ride through tribal country.", "elevation": 55, "distance": 320},
            {"day": 9, "title": "Departure", "description": "Certificate ceremony. Departure.", "elevation": 55, "distance": 0},
        ],
    },
    {
        "slug": "winter-zanskar",
        "title": "WINTER ZANSKAR",
        "subtitle": "The Frozen Highway - Chadar Trek Route",
        "description": "The most extreme expedition we offer. Ride to the edge of the frozen Zanskar River in winter. Sub-zero temperatures, ice-covered roads, and landscapes so stark they feel extraterrestrial. Not for the faint-hearted.",
        "difficulty": "EXTREME",
        "duration": 14,
        "terrain": "ICE",
        "price": 55000,
        "maxGroupSize": 6,
        "nextDeparture": "2027-01-15",
        "image": "https://images.unsplash.com/photo-1767973741492-338cd1e8a740?w=800&q=80",
        "elevation": {"min": 3000, "max": 5300},
        "shadowFleet": [
            "Backup heated-grip motorcycle",
            "Chase vehicle with heater",
            "Satellite phone",
            "Cold-weather survival kit",
            "Portable oxygen concentrator",
            "Emergency evacuation helicopter on standby",
        ],
        "itinerary": [
            {"day": 1, "title": "Leh Winter Arrival", "description": "Fly in. Cold acclimatization begins.", "elevation": 3500, "distance": 0},
            {"day": 2, "title": "Acclimatization Day 1", "description": "Short rides around Leh. Gear testing in sub-zero.", "elevation": 3500, "distance": 30},
            {"day": 3, "title": "Acclimatization Day 2", "description": "Advanced cold-weather riding drills.", "elevation": 3500, "distance": 40},
            {"day": 4, "title": "Leh to Nimmu", "description": "First expedition day. Ride along frozen Zanskar.", "elevation": 3100, "distance": 35},
            {"day": 5, "title": "Nimmu to Chilling", "description": "Ice road approach. River crossing preparations.", "elevation": 3050, "distance": 60},
            {"day": 6, "title": "Chilling Basecamp", "description": "Set up advanced camp. Ice reconnaissance.", "elevation": 3000, "distance": 10},
            {"day": 7, "title": "Frozen River Ride", "description": "Ride sections of the frozen Zanskar. Extreme caution.", "elevation": 3050, "distance": 25},
            {"day": 8, "title": "Rest & Recovery", "description": "Maintenance day. Local village visit.", "elevation": 3050, "distance": 0},
            {"day": 9, "title": "Return to Leh", "description": "Ride back through frozen landscape.", "elevation": 3500, "distance": 95},
            {"day": 10, "title": "Leh to Khardung La", "description": "Winter summit attempt. Extreme cold and wind.", "elevation": 5359, "distance": 40},
            {"day": 11, "title": "Nubra Winter", "description": "Nubra Valley in winter. Surreal silence.", "elevation": 3048, "distance": 80},
            {"day": 12, "title": "Nubra to Leh", "description": "Return over Khardung La.", "elevation": 3500, "distance": 120},
            {"day": 13, "title": "Leh Celebration", "description": "Victory celebrations. Hot springs visit.", "elevation": 3500, "distance": 30},
            {"day": 14, "title": "Departure", "description": "Farewell. Fly out of Leh.", "elevation": 3500, "distance": 0},
        ],
    },
]

FLEET_CATALOG = [
    {
        "id": "himalayan-450",
        "category": "bike",
        "name": "Royal Enfield Himalayan 450",
        "image": "https://images.unsplash.com/photo-1753121019457-556cc9e0f299?w=600&q=80",
        "description": "The definitive adventure touring motorcycle for India. Liquid-cooled, fuel-injected, and built for punishment.",
        "terrain": ["HIGH-ALTITUDE", "MOUNTAIN", "ALL-TERRAIN"],
        "pros": ["Excellent ground clearance (200mm)", "Robust & easy to repair anywhere", "Comfortable for long distances", "Good low-end torque"],
        "cons": ["Heavy for tight off-road trails", "Vibrations at high RPM", "Limited top speed"],
    },
    {
        "id": "xpulse-200",
        "category": "bike",
        "name": "Hero Xpulse 200 4V",
        "image": "https://images.unsplash.com/photo-1730793415965-4856f826a599?w=600&q=80",
        "description": "The lightweight trail weapon. Perfect for jungle trails and narrow mountain paths where the Himalayan feels too heavy.",
        "terrain": ["JUNGLE", "TRAIL", "MOUNTAIN"],
        "pros": ["Extremely lightweight (154kg)", "Great off-road capability", "Affordable maintenance", "Nimble handling"],
        "cons": ["Less highway comfort", "Smaller fuel tank", "Less suited for very long distances"],
    },
    {
        "id": "ktm-390",
        "category": "bike",
        "name": "KTM 390 Adventure",
        "image": "https://images.unsplash.com/photo-1586731352158-3e5a69ca56c2?w=600&q=80",
        "description": "European engineering meets Indian terrain. Best for experienced riders who want performance on both tarmac and trails.",
        "terrain": ["MOUNTAIN", "MIXED-TERRAIN", "HIGHWAY"],
        "pros": ["Powerful 373cc engine", "Excellent electronics (TC, ABS modes)", "Premium suspension", "Great road manners"],
        "cons": ["Expensive service network", "Heat management in traffic", "Requires premium fuel"],
    },
    {
        "id": "helmet-guide",
        "category": "gear",
        "name": "Helmet Selection Guide",
        "description": "Your helmet is non-negotiable. Full-face, ECE/ISI certified, with a clear and tinted visor. We recommend dual-sport helmets with peak visors for versatility. Budget: INR 5,000 - 15,000.",
        "essentials": ["Full-face dual-sport helmet (ECE certified)", "Clear visor + tinted visor", "Anti-fog pinlock insert", "Chin curtain for dust protection"],
    },
    {
        "id": "riding-jacket",
        "category": "gear",
        "name": "Riding Jacket & Armor",
        "description": "CE Level 2 armor on shoulders, elbows, and back is mandatory. Choose a textile jacket with waterproof liner for mountains, mesh for desert runs.",
        "essentials": ["CE Level 2 armor (shoulders, elbows, back)", "Waterproof textile jacket", "Hi-viz rain shell", "Neck gaiter/balaclava"],
    },
    {
        "id": "hydration-pack",
        "category": "gear",
        "name": "Hydration & Nutrition",
        "description": "Dehydration at altitude kills. Carry a 3L hydration pack inside your riding jacket or a tank bag. Electrolyte sachets are mandatory above 3,500m.",
        "essentials": ["3L hydration bladder", "Electrolyte sachets (ORS)", "High-calorie energy bars", "Thermos for hot water"],
    },
    {
        "id": "altitude-prep",
        "category": "advisory",
        "name": "High-Altitude Preparation",
        "description": "Above 3,500m, your body is the weakest link, not the bike. Start Diamox (Acetazolamide) 2 days before ascent (consult your doctor). Never rush acclimatization.",
        "tips": [
            "Consult a doctor about Diamox before the trip",
            "Hydrate aggressively - 4L/day minimum",
            "Ascend no more than 500m per day above 3,000m",
            "Recognize AMS symptoms: headache, nausea, dizziness",
            "Descend immediately if symptoms worsen",
            "Carry portable oxygen above 4,500m",
        ],
    },
]

MAP_POINTS_CATALOG = [
    {"id": "mech-1", "type": "mechanic", "name": "Rinchen Motor Works", "lat": 34.1526, "lng": 77.5771, "city": "Leh", "phone": "+91-9876543001", "description": "RE specialist. Open 8AM-8PM. Stock of Himalayan parts."},
    {"id": "mech-2", "type": "mechanic", "name": "Tanglang La Roadside Repair", "lat": 32.5289, "lng": 77.7849, "city": "Tanglang La", "phone": "+91-9876543002", "description": "Emergency repairs only. Seasonal (Jun-Sep)."},
    {"id": "mech-3", "type": "mechanic", "name": "Spiti Motor Garage", "lat": 32.5936, "lng": 78.0717, "city": "Kaza", "phone": "+91-9876543003", "description": "Multi-brand mechanic. Welding available."},
    {"id": "fuel-1", "type": "fuel", "name": "Indian Oil - Leh", "lat": 34.1685, "lng": 77.5856, "city": "Leh", "description": "Main fuel station. Petrol & Diesel. Open 6AM-10PM."},
    {"id": "fuel-2", "type": "fuel", "name": "HP Fuel - Karu", "lat": 34.0513, "lng": 77.7987, "city": "Karu", "description": "Last fuel before Pangong. Fill up here."},
    {"id": "fuel-3", "type": "fuel", "name": "BPCL - Tandi", "lat": 32.5513, "lng": 76.9987, "city": "Tandi", "description": "First fuel in Lahaul. Can run dry on busy weekends."},
    {"id": "fuel-4", "type": "fuel", "name": "Indian Oil - Kaza", "lat": 32.5950, "lng": 78.0720, "city": "Kaza", "description": "Only fuel station in Spiti Valley. Rationed sometimes."},
    {"id": "stay-1", "type": "stay", "name": "The Grand Dragon", "lat": 34.1650, "lng": 77.5800, "city": "Leh", "description": "Premium biker-friendly hotel. Heated rooms, parking, gear drying room."},
    {"id": "stay-2", "type": "stay", "name": "Padma Homestay", "lat": 34.2770, "lng": 77.6020, "city": "Nubra", "description": "Traditional homestay. Hot meals, warm beds. Bike parking."},
    {"id": "stay-3", "type": "stay", "name": "Zostel Spiti", "lat": 32.5920, "lng": 78.0700, "city": "Kaza", "description": "Budget-friendly hostel. Common room, bike tools available."},
    {"id": "stay-4", "type": "stay", "name": "Camp Pangong", "lat": 33.7580, "lng": 78.6650, "city": "Pangong", "description": "Luxury camp by the lake. Heated tents. Seasonal."},
    {"id": "mech-4", "type": "mechanic", "name": "Jodhpur Bike Garage", "lat": 26.2389, "lng": 73.0243, "city": "Jodhpur", "description": "All-brand motorcycle service. Desert riding prep specialist."},
    {"id": "fuel-5", "type": "fuel", "name": "HP Fuel - Jaisalmer", "lat": 26.9157, "lng": 70.9083, "city": "Jaisalmer", "description": "Fill up before desert dunes. 24/7 operation."},
    {"id": "stay-5", "type": "stay", "name": "Desert Haveli", "lat": 26.9124, "lng": 70.9120, "city": "Jaisalmer", "description": "Heritage stay with courtyard parking. Mechanic on call."},
]
