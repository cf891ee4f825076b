"""Deterministic catalogue data for travel package and hotel searches.

Used when generation is skipped or its output is unusable. Identifiers are
fixed so repeated searches give the caller stable ids to book against.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_MIN_DAYS = 3
DEFAULT_MAX_DAYS = 14
OPEN_ENDED_MIN_DAYS = 15
OPEN_ENDED_MAX_DAYS = 30

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(0)) if match else None


def parse_duration_range(duration: Optional[str]) -> Tuple[int, int]:
    """Day range from a duration filter such as '3-7', '15+' or '10'.

    Unparseable or zero bounds fall back to the defaults.
    """
    if not duration:
        return DEFAULT_MIN_DAYS, DEFAULT_MAX_DAYS

    text = str(duration)
    if "-" in text:
        low, _, high = text.partition("-")
        return (_leading_int(low) or DEFAULT_MIN_DAYS,
                _leading_int(high) or DEFAULT_MAX_DAYS)
    if "+" in text:
        return _leading_int(text.replace("+", "")) or OPEN_ENDED_MIN_DAYS, OPEN_ENDED_MAX_DAYS
    try:
        days = int(float(text))
    except (ValueError, OverflowError):
        return DEFAULT_MIN_DAYS, DEFAULT_MAX_DAYS
    return days, days


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(low, value), high)


# Per-package template: price offset from the base price, discount factor
# (None for no discount) and the preferred trip length before clamping.
TRAVEL_PACKAGES: List[Dict[str, Any]] = [
    {
        "id": "t290f1ee-6c54-4b01-90e6-d701748f0851",
        "name": "{d} Explorer",
        "description": "Discover the wonders of {d} with our comprehensive tour package. Experience the perfect blend of cultural immersion and natural beauty. Our expert guides will take you to hidden gems and must-see attractions.",
        "price_offset": 0,
        "discount": 0.85,
        "preferred_days": 7,
        "max_participants": 12,
        "rating": 4.8,
        "highlights": [
            "Exclusive guided tour of {d}'s main attractions",
            "Authentic local cuisine experiences",
            "Comfortable accommodations in premium locations",
            "Small group size for personalized attention",
        ],
        "itinerary": [
            {"title": "Arrival & Welcome", "description": "Arrive in your destination and enjoy a welcome dinner with your fellow travelers.", "activities": ["Airport transfer", "Welcome dinner", "Tour briefing"]},
            {"title": "Cultural Exploration", "description": "Dive into the rich cultural heritage with visits to museums and historical sites.", "activities": ["Guided museum tour", "Historical district walk", "Local craft workshop"]},
            {"title": "Natural Wonders", "description": "Experience the breathtaking natural scenery that makes this destination famous.", "activities": ["Scenic hike", "Photography spots", "Picnic lunch in nature"]},
        ],
        "included_services": ["Professional English-speaking guide", "All accommodations", "Daily breakfast and selected meals", "All entrance fees", "Airport transfers", "Transportation between destinations"],
        "excluded_services": ["International flights", "Travel insurance", "Personal expenses", "Optional activities", "Gratuities for guides and drivers"],
        "images": [
            "https://images.unsplash.com/photo-1530789253388-582c481c54b0?q=80&w=2070",
            "https://images.unsplash.com/photo-1476514525535-07fb3b4ae5f1?q=80&w=2070",
            "https://images.unsplash.com/photo-1504280390367-361c6d9f38f4?q=80&w=2070",
        ],
        "categories": ["Cultural", "Adventure", "Sightseeing"],
        "features": ["English Guide", "Small Group", "Meals Included"],
        "accommodation_type": "4-Star Hotels",
        "activity_level": "Moderate",
        "availability": "Year-round",
    },
    {
        "id": "t290f1ee-6c54-4b01-90e6-d701748f0852",
        "name": "{d} Adventure Tour",
        "description": "Embark on a thrilling adventure in the heart of {d}. This action-packed itinerary is perfect for those seeking excitement and new experiences. Challenge yourself with outdoor activities while enjoying stunning landscapes.",
        "price_offset": 500,
        "discount": None,
        "preferred_days": 10,
        "max_participants": 8,
        "rating": 4.9,
        "highlights": ["Adrenaline-pumping outdoor activities", "Exploration of remote and pristine areas", "Close encounters with local wildlife", "Expert adventure guides"],
        "itinerary": [
            {"title": "Adventure Begins", "description": "Meet your guides and prepare for your upcoming adventure with equipment briefing.", "activities": ["Equipment check", "Safety briefing", "Welcome dinner"]},
            {"title": "Into the Wild", "description": "Venture into untouched wilderness areas with expert guides leading the way.", "activities": ["Hiking expedition", "Wildlife spotting", "Camping under the stars"]},
            {"title": "Peak Experiences", "description": "Challenge yourself with the highlight adventure activities of the tour.", "activities": ["Rock climbing", "Whitewater rafting", "Mountain biking"]},
        ],
        "included_services": ["Professional adventure guides", "All necessary equipment", "Mixed accommodation (hotels and camping)", "All meals during the tour", "Activity fees and permits", "Transportation during the tour"],
        "excluded_services": ["Flights to and from destination", "Travel insurance (mandatory)", "Personal gear and clothing", "Alcoholic beverages", "Optional activities not in itinerary"],
        "images": [
            "https://images.unsplash.com/photo-1551632811-561732d1e306?q=80&w=2070",
            "https://images.unsplash.com/photo-1544960511-1db20083cdef?q=80&w=1887",
            "https://images.unsplash.com/photo-1533130061792-64b345e4a833?q=80&w=2070",
        ],
        "categories": ["Adventure", "Active", "Outdoor"],
        "features": ["Expert Guides", "Equipment Included", "All-Inclusive"],
        "accommodation_type": "Mixed (Hotels & Camping)",
        "activity_level": "Challenging",
        "availability": "March to November",
    },
    {
        "id": "t290f1ee-6c54-4b01-90e6-d701748f0853",
        "name": "{d} Culinary Journey",
        "description": "Delight your taste buds with an immersive culinary experience in {d}. This food-focused tour combines cooking classes, market visits, and dining at both local gems and fine restaurants to provide a complete gastronomic adventure.",
        "price_offset": 300,
        "discount": 0.9,
        "preferred_days": 8,
        "max_participants": 10,
        "rating": 4.7,
        "highlights": ["Hands-on cooking classes with local chefs", "Market tours with food tastings", "Dining at renowned local restaurants", "Wine and beverage pairings"],
        "itinerary": [
            {"title": "Taste Introduction", "description": "Begin your culinary journey with a tasting menu showcasing local specialties.", "activities": ["Welcome dinner", "Food tradition presentation", "Beverage pairing"]},
            {"title": "Markets & Ingredients", "description": "Explore local markets and learn about regional ingredients and their uses.", "activities": ["Guided market tour", "Food tastings", "Ingredient selection"]},
            {"title": "Cooking Mastery", "description": "Put your skills to the test in hands-on cooking classes with expert chefs.", "activities": ["Morning cooking class", "Lunch featuring your creations", "Evening gourmet dinner"]},
        ],
        "included_services": ["All cooking classes and food workshops", "Market tours with tastings", "Meals as specified in itinerary", "Wine and beverage pairings", "Recipe collection to take home", "Luxury accommodation"],
        "excluded_services": ["International flights", "Travel insurance", "Additional alcoholic beverages", "Personal expenses", "Meals not specified in itinerary"],
        "images": [
            "https://images.unsplash.com/photo-1514326640560-7d063ef2aed5?q=80&w=2070",
            "https://images.unsplash.com/photo-1600335895229-6e75511892c8?q=80&w=2070",
            "https://images.unsplash.com/photo-1605522561233-768ad7a8fabf?q=80&w=2074",
        ],
        "categories": ["Culinary", "Cultural", "Luxury"],
        "features": ["Cooking Classes", "Gourmet Dining", "Market Tours"],
        "accommodation_type": "Boutique Hotels",
        "activity_level": "Easy",
        "availability": "Year-round",
    },
    {
        "id": "t290f1ee-6c54-4b01-90e6-d701748f0854",
        "name": "{d} Family Discovery",
        "description": "Create unforgettable family memories with our specially designed tour of {d}. This family-friendly itinerary balances fun activities for children with experiences adults will appreciate, ensuring everyone has an amazing time.",
        "price_offset": 100,
        "discount": 0.95,
        "preferred_days": 9,
        "max_participants": 20,
        "rating": 4.8,
        "highlights": ["Kid-friendly activities and attractions", "Educational experiences for all ages", "Comfortable family accommodations", "Balanced pace with free time"],
        "itinerary": [
            {"title": "Family Welcome", "description": "Get acquainted with your guide and other families as the adventure begins.", "activities": ["Interactive welcome activity", "Kid-friendly dinner", "Trip briefing for parents"]},
            {"title": "Learning Adventures", "description": "Engage in educational activities that bring the destination's history and culture to life.", "activities": ["Interactive museum visit", "Hands-on cultural workshop", "Scavenger hunt"]},
            {"title": "Outdoor Fun", "description": "Enjoy outdoor activities suitable for different ages and abilities.", "activities": ["Gentle hiking trail", "Wildlife spotting", "Picnic lunch", "Free time at the beach/park"]},
        ],
        "included_services": ["Family-friendly accommodations", "Daily breakfast and selected meals", "All activities and entrance fees", "Child-specific equipment where needed", "Family-friendly local guides", "Transportation during the tour"],
        "excluded_services": ["Flights to destination", "Travel insurance", "Personal expenses", "Additional activities", "Babysitting services"],
        "images": [
            "https://images.unsplash.com/photo-1608848461950-0fe51dfc41cb?q=80&w=2070",
            "https://images.unsplash.com/photo-1600880292630-ee8a00403024?q=80&w=2070",
            "https://images.unsplash.com/photo-1502086223501-7ea6ecd79368?q=80&w=2023",
        ],
        "categories": ["Family", "Educational", "Leisure"],
        "features": ["Kid-Friendly", "Educational", "Relaxed Pace"],
        "accommodation_type": "Family Hotels",
        "activity_level": "Easy to Moderate",
        "availability": "School Holidays",
    },
    {
        "id": "t290f1ee-6c54-4b01-90e6-d701748f0855",
        "name": "Luxury {d} Escape",
        "description": "Indulge in the ultimate luxury experience in {d}. This premium tour combines 5-star accommodations, exclusive experiences, and VIP treatment throughout your journey. Perfect for those seeking refined travel with every detail taken care of.",
        "price_offset": 1500,
        "discount": None,
        "preferred_days": 7,
        "max_participants": 6,
        "rating": 4.9,
        "highlights": ["5-star luxury accommodations", "Private guided experiences", "Gourmet dining experiences", "VIP access to attractions"],
        "itinerary": [
            {"title": "Luxurious Arrival", "description": "Begin your premium experience with VIP airport service and champagne welcome.", "activities": ["Private airport transfer", "Champagne reception", "Personalized welcome dinner"]},
            {"title": "Exclusive Experiences", "description": "Enjoy private access to cultural sites and special experiences unavailable to regular tourists.", "activities": ["Private museum tour", "Exclusive cultural performance", "VIP shopping experience"]},
            {"title": "Premium Relaxation", "description": "Balance cultural experiences with luxury relaxation and wellness options.", "activities": ["Spa treatment", "Private yacht excursion", "Gourmet tasting menu dinner"]},
        ],
        "included_services": ["5-star luxury accommodations", "Private guide and chauffeur", "All meals at premium restaurants", "VIP entrance to attractions", "Luxury airport transfers", "Concierge service throughout"],
        "excluded_services": ["International flights (business class available for booking)", "Travel insurance", "Personal shopping purchases", "Gratuities (recommended but at your discretion)"],
        "images": [
            "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?q=80&w=2070",
            "https://images.unsplash.com/photo-1520420097861-e4959843b520?q=80&w=2070",
            "https://images.unsplash.com/photo-1566073771259-6a8506099945?q=80&w=2070",
        ],
        "categories": ["Luxury", "Exclusive", "Premium"],
        "features": ["5-Star Hotels", "Private Guide", "All-Inclusive"],
        "accommodation_type": "Luxury Hotels & Resorts",
        "activity_level": "Easy",
        "availability": "Year-round",
    },
    {
        "id": "t290f1ee-6c54-4b01-90e6-d701748f0856",
        "name": "{d} Sustainable Eco-Tour",
        "description": "Experience {d} in an environmentally responsible way with our eco-conscious tour. Stay in sustainable accommodations, support local communities, and minimize your carbon footprint while enjoying authentic experiences.",
        "price_offset": 200,
        "discount": 0.9,
        "preferred_days": 10,
        "max_participants": 12,
        "rating": 4.7,
        "highlights": ["Eco-friendly accommodations", "Community-based tourism initiatives", "Conservation activities", "Low-impact transportation options"],
        "itinerary": [
            {"title": "Sustainable Introduction", "description": "Learn about the eco-principles of your tour and the local conservation efforts.", "activities": ["Eco-lodge check-in", "Sustainability briefing", "Locally-sourced welcome dinner"]},
            {"title": "Conservation in Action", "description": "Participate in local conservation projects that help protect the natural environment.", "activities": ["Tree planting activity", "Wildlife monitoring", "Environmental education workshop"]},
            {"title": "Community Connections", "description": "Engage with local communities and learn how tourism supports their sustainable development.", "activities": ["Village visit", "Artisan workshop", "Community-hosted meal"]},
        ],
        "included_services": ["Eco-certified accommodations", "Locally-sourced meals", "Guides from local communities", "Carbon offset for ground transportation", "Contributions to local conservation projects", "Reusable water bottle and amenities"],
        "excluded_services": ["International flights", "Travel insurance", "Personal expenses", "Additional carbon offsets", "Items not specified"],
        "images": [
            "https://images.unsplash.com/photo-1501785888041-af3ef285b470?q=80&w=2070",
            "https://images.unsplash.com/photo-1578645510447-e20b4311e3ce?q=80&w=2070",
            "https://images.unsplash.com/photo-1470770841072-f978cf4d019e?q=80&w=2070",
        ],
        "categories": ["Eco-Friendly", "Sustainable", "Nature"],
        "features": ["Carbon Offset", "Community Tourism", "Eco-Lodges"],
        "accommodation_type": "Eco-Lodges & Sustainable Hotels",
        "activity_level": "Moderate",
        "availability": "Year-round",
    },
]


def travel_packages(destination: str,
                    min_price: float,
                    max_price: float,
                    duration: Optional[str],
                ) -> Dict[str, Any]:
    """Six template packages priced from the requested range."""
    base_price = min(max(min_price, 1000), max_price)
    min_days, max_days = parse_duration_range(duration)

    packages = []
    for template in TRAVEL_PACKAGES:
        price = base_price + template["price_offset"]
        discount = template["discount"]
        packages.append({
            "id": template["id"],
            "name": template["name"].format(d=destination),
            "description": template["description"].format(d=destination),
            "destination": destination,
            "price": price,
            "discounted_price": round(price * discount, 2) if discount else None,
            "duration": int(_clamp(template["preferred_days"], min_days, max_days)),
            "max_participants": template["max_participants"],
            "rating": template["rating"],
            "highlights": [h.format(d=destination) for h in template["highlights"]],
            "itinerary": [dict(day, activities=list(day["activities"])) for day in template["itinerary"]],
            "included_services": list(template["included_services"]),
            "excluded_services": list(template["excluded_services"]),
            "images": list(template["images"]),
            "categories": list(template["categories"]),
            "features": list(template["features"]),
            "accommodation_type": template["accommodation_type"],
            "activity_level": template["activity_level"],
            "availability": template["availability"],
        })

    return {"travelPackages": packages}


HOTELS: List[Dict[str, Any]] = [
    {
        "id": "d290f1ee-6c54-4b01-90e6-d701748f0851",
        "name": "{d} Grand Hotel",
        "address": "123 Main Street, {d}",
        "description": "Experience luxury in the heart of {d} with stunning views. Our centrally located hotel offers premium amenities and exceptional service. Just minutes away from major attractions and shopping districts.",
        "price_offset": 99,
        "rating": 4.8,
        "amenities": ["Free Wi-Fi", "Swimming Pool", "Spa", "Fitness Center", "Restaurant", "Room Service", "24-Hour Front Desk"],
        "images": [
            "https://images.unsplash.com/photo-1566073771259-6a8506099945?q=80&w=2070",
            "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?q=80&w=2070",
            "https://images.unsplash.com/photo-1582719508461-905c673771fd?q=80&w=2025",
        ],
        "room_types": ["Standard", "Deluxe", "Suite"],
    },
    {
        "id": "d290f1ee-6c54-4b01-90e6-d701748f0852",
        "name": "{d} Boutique Resort",
        "address": "456 Park Avenue, {d}",
        "description": "A charming boutique hotel offering personalized service and unique accommodations. Our intimate property features individually designed rooms and a tranquil garden courtyard. Enjoy our award-winning restaurant and bar.",
        "price_offset": 149,
        "rating": 4.6,
        "amenities": ["Free Wi-Fi", "Garden", "Restaurant", "Bar", "Concierge", "Laundry Service", "Airport Shuttle"],
        "images": [
            "https://images.unsplash.com/photo-1618245318763-453825cd2de4?q=80&w=2070",
            "https://images.unsplash.com/photo-1629140727571-9b5c6f6267b4?q=80&w=2127",
            "https://images.unsplash.com/photo-1578683010236-d716f9a3f461?q=80&w=2070",
        ],
        "room_types": ["Classic", "Superior", "Junior Suite"],
    },
    {
        "id": "d290f1ee-6c54-4b01-90e6-d701748f0853",
        "name": "{d} Plaza Hotel",
        "address": "789 Boulevard Street, {d}",
        "description": "Modern elegance meets comfort at our downtown hotel. Floor-to-ceiling windows offer spectacular city views. Our rooftop pool and lounge is the perfect place to unwind after a day of exploring {d}.",
        "price_offset": 79,
        "rating": 4.4,
        "amenities": ["Free Wi-Fi", "Rooftop Pool", "Fitness Center", "Restaurant", "Business Center", "Parking", "Pet Friendly"],
        "images": [
            "https://images.unsplash.com/photo-1606402179428-a57976d71fa4?q=80&w=2074",
            "https://images.unsplash.com/photo-1631049552240-59c37f38802b?q=80&w=2070",
            "https://images.unsplash.com/photo-1616594039964-ae9021a400a0?q=80&w=2080",
        ],
        "room_types": ["City View", "Executive", "Family Suite"],
    },
    {
        "id": "d290f1ee-6c54-4b01-90e6-d701748f0854",
        "name": "{d} Riverside Inn",
        "address": "321 Waterfront Drive, {d}",
        "description": "Nestled along the scenic riverfront, our hotel combines rustic charm with modern comforts. Enjoy breathtaking water views and easy access to riverside walking trails. Our restaurant specializes in farm-to-table cuisine.",
        "price_offset": 199,
        "rating": 4.7,
        "amenities": ["Free Wi-Fi", "Riverside Terrace", "Restaurant", "Bar", "Bicycle Rental", "Fishing", "Garden"],
        "images": [
            "https://images.unsplash.com/photo-1564501049412-61c2a3083791?q=80&w=2089",
            "https://images.unsplash.com/photo-1584132915807-fd1f5fbc078f?q=80&w=2070",
            "https://images.unsplash.com/photo-1629140727571-9b5c6f6267b4?q=80&w=2127",
        ],
        "room_types": ["River View", "Garden View", "Luxury Suite"],
    },
    {
        "id": "d290f1ee-6c54-4b01-90e6-d701748f0855",
        "name": "Historic {d} Hotel",
        "address": "555 Heritage Lane, {d}",
        "description": "A landmark hotel housed in a beautifully restored historic building. Original architectural details blend with contemporary amenities. Our property is within walking distance to major museums and cultural attractions.",
        "price_offset": 129,
        "rating": 4.5,
        "amenities": ["Free Wi-Fi", "Historic Tours", "Restaurant", "Bar", "Library", "Meeting Rooms", "Valet Parking"],
        "images": [
            "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?q=80&w=2070",
            "https://images.unsplash.com/photo-1596394516093-501ba68a0ba6?q=80&w=2070",
            "https://images.unsplash.com/photo-1566073771259-6a8506099945?q=80&w=2070",
        ],
        "room_types": ["Heritage Room", "Premium Room", "Presidential Suite"],
    },
    {
        "id": "d290f1ee-6c54-4b01-90e6-d701748f0856",
        "name": "{d} Beach Resort",
        "address": "888 Coastal Highway, {d}",
        "description": "Escape to our beachfront paradise with direct access to pristine sands and turquoise waters. Spacious rooms feature private balconies with ocean views. Enjoy water sports, multiple dining options, and our luxurious spa.",
        "price_offset": 249,
        "rating": 4.9,
        "amenities": ["Free Wi-Fi", "Private Beach", "Swimming Pools", "Spa", "Water Sports", "Multiple Restaurants", "Kids Club"],
        "images": [
            "https://images.unsplash.com/photo-1571896349842-33c89424de2d?q=80&w=2080",
            "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?q=80&w=2070",
            "https://images.unsplash.com/photo-1584132967334-10e028bd69f7?q=80&w=2070",
        ],
        "room_types": ["Ocean View", "Garden Bungalow", "Beach Villa"],
    },
]


def hotels(location: str, min_price: float, max_price: float) -> Dict[str, Any]:
    """Six template hotels priced from the requested range."""
    base_price = min(max(min_price, 100), max_price)

    return {
        "hotels": [
            {
                "id": template["id"],
                "name": template["name"].format(d=location),
                "location": f"{location}, Country",
                "address": template["address"].format(d=location),
                "description": template["description"].format(d=location),
                "price_per_night": base_price + template["price_offset"],
                "rating": template["rating"],
                "amenities": list(template["amenities"]),
                "images": list(template["images"]),
                "room_types": list(template["room_types"]),
            }
            for template in HOTELS
        ]
    }


def hotel_details(hotel_id: str, name: str, location: str) -> Dict[str, Any]:
    """Detailed record for one hotel, echoing the caller's id, name and location."""
    return {
        "hotel": {
            "id": hotel_id,
            "name": name,
            "location": location,
            "address": f"123 Main Street, {location}",
            "description": (
                f"Experience luxury and comfort at {name}, located in the heart of {location}. "
                f"Our hotel offers spacious rooms with modern amenities, an award-winning restaurant "
                f"serving local and international cuisine, and a relaxing spa. We are conveniently "
                f"located near major attractions, shopping centers, and business districts, making us "
                f"the perfect choice for both leisure and business travelers. Our dedicated staff is "
                f"committed to providing exceptional service to ensure a memorable stay."
            ),
            "price_per_night": 249.99,
            "rating": 4.7,
            "reviews_count": 342,
            "amenities": [
                "Free Wi-Fi", "Swimming Pool", "Fitness Center", "Spa & Wellness Center",
                "Restaurant & Bar", "24-Hour Room Service", "Business Center",
                "Concierge Service", "Laundry Service", "Airport Shuttle",
            ],
            "images": [
                "https://images.unsplash.com/photo-1566073771259-6a8506099945?q=80&w=2070",
                "https://images.unsplash.com/photo-1582719508461-905c673771fd?q=80&w=2025",
                "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?q=80&w=2070",
                "https://images.unsplash.com/photo-1618245318763-453825cd2de4?q=80&w=2070",
                "https://images.unsplash.com/photo-1629140727571-9b5c6f6267b4?q=80&w=2127",
            ],
            "room_types": [
                {
                    "id": "2a8b5e35-1c9c-4b3d-8c3a-db7e3bcd3e4f",
                    "name": "Deluxe King Room",
                    "description": "Spacious room with a king-sized bed, work desk, and city views. Features premium bedding, a 50-inch smart TV, and a luxurious bathroom with a rainfall shower.",
                    "price_per_night": 249.99,
                    "capacity": 2,
                    "amenities": ["King Bed", "City View", "Air Conditioning", "Mini Bar", "Safe", "Free Wi-Fi", "Coffee Maker"],
                    "images": [
                        "https://images.unsplash.com/photo-1631049552240-59c37f38802b?q=80&w=2070",
                        "https://images.unsplash.com/photo-1616594039964-ae9021a400a0?q=80&w=2080",
                    ],
                },
                {
                    "id": "9e7b3f2a-1d8e-4c5a-b9f2-e7d6a5c8b1a3",
                    "name": "Executive Suite",
                    "description": "Elegant suite with a separate living area, king-sized bed, and panoramic views. Includes access to the Executive Lounge with complimentary breakfast and evening cocktails.",
                    "price_per_night": 399.99,
                    "capacity": 2,
                    "amenities": ["King Bed", "Separate Living Area", "Executive Lounge Access", "Premium Toiletries", "Espresso Machine", "Free Wi-Fi", "Bathrobe & Slippers"],
                    "images": [
                        "https://images.unsplash.com/photo-1578683010236-d716f9a3f461?q=80&w=2070",
                        "https://images.unsplash.com/photo-1611892440504-42a792e24d32?q=80&w=2070",
                    ],
                },
                {
                    "id": "5c2e8f1d-7a3b-4e9c-8d5f-1a2b3c4d5e6f",
                    "name": "Family Room",
                    "description": "Comfortable room with two queen beds, perfect for families. Features a spacious bathroom, extra seating area, and all standard amenities to ensure a pleasant stay for the whole family.",
                    "price_per_night": 329.99,
                    "capacity": 4,
                    "amenities": ["Two Queen Beds", "Extra Seating", "Child-Friendly", "Air Conditioning", "Mini Fridge", "Free Wi-Fi", "Smart TV"],
                    "images": [
                        "https://images.unsplash.com/photo-1566665797739-1674de7a421a?q=80&w=2070",
                        "https://images.unsplash.com/photo-1582719508461-905c673771fd?q=80&w=2025",
                    ],
                },
            ],
            "nearby_attractions": [
                {"name": f"{location} Central Park", "description": "A beautiful urban park just 10 minutes walk from the hotel. Perfect for morning jogs or relaxing afternoon strolls."},
                {"name": f"{location} Museum of Art", "description": "World-class art museum featuring both local and international exhibitions, located just 2 km from the hotel."},
                {"name": f"{location} Shopping District", "description": "Upscale shopping area with boutiques, department stores, and local crafts, within easy walking distance."},
                {"name": f"Historic {location} District", "description": "Explore the charming historic district with its centuries-old architecture and quaint cafes."},
            ],
            "policies": {
                "check_in_time": "3:00 PM",
                "check_out_time": "12:00 PM",
                "cancellation_policy": "Free cancellation up to 24 hours before check-in. Cancellations made less than 24 hours before check-in may be subject to a fee equivalent to one night's stay.",
                "pet_policy": "Pets are welcome with a $50 fee per stay. Please notify the hotel in advance.",
                "payment_methods": "All major credit cards accepted. A valid credit card is required at check-in for incidental charges.",
            },
        }
    }
