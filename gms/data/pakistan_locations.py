"""
Built-in Pakistan locations: provinces/territories and the cities registered under each.
Loaded through gms.core.reference_data, never read directly by validation or API code.
"""
from typing import Dict, List

PAKISTAN_PROVINCES = [
    {"name": "Punjab", "code": "PB", "capital": "Lahore"},
    {"name": "Sindh", "code": "SD", "capital": "Karachi"},
    {"name": "Khyber Pakhtunkhwa", "code": "KP", "capital": "Peshawar"},
    {"name": "Balochistan", "code": "BA", "capital": "Quetta"},
    {"name": "Islamabad Capital Territory", "code": "IS", "capital": "Islamabad"},
    {"name": "Gilgit-Baltistan", "code": "GB", "capital": "Gilgit"},
    {"name": "Azad Jammu and Kashmir", "code": "JK", "capital": "Muzaffarabad"},
]

PAKISTAN_CITIES_BY_PROVINCE: Dict[str, List[str]] = {
    "Punjab": [
        "Lahore", "Faisalabad", "Rawalpindi", "Multan", "Gujranwala", "Sialkot", "Bahawalpur",
        "Sargodha", "Sheikhupura", "Jhang", "Rahim Yar Khan", "Gujrat", "Kasur", "Sahiwal",
        "Okara", "Wah Cantonment", "Dera Ghazi Khan", "Chiniot", "Kamoke", "Mandi Bahauddin",
        "Jhelum", "Sadiqabad", "Khanewal", "Hafizabad", "Muzaffargarh", "Khanpur", "Attock",
        "Chakwal", "Mianwali", "Bhakkar", "Layyah", "Vehari", "Pakpattan", "Narowal", "Lodhran",
    ],
    "Sindh": [
        "Karachi", "Hyderabad", "Sukkur", "Larkana", "Nawabshah", "Mirpur Khas", "Jacobabad",
        "Shikarpur", "Khairpur", "Dadu", "Thatta", "Badin", "Tando Allahyar", "Tando Adam",
        "Umerkot", "Sanghar", "Ghotki", "Kashmore", "Matiari", "Jamshoro",
    ],
    "Khyber Pakhtunkhwa": [
        "Peshawar", "Mardan", "Mingora", "Kohat", "Abbottabad", "Dera Ismail Khan", "Mansehra",
        "Nowshera", "Swabi", "Charsadda", "Bannu", "Haripur", "Chitral", "Timergara",
        "Karak", "Lakki Marwat", "Tank", "Hangu",
    ],
    "Balochistan": [
        "Quetta", "Turbat", "Khuzdar", "Hub", "Chaman", "Gwadar", "Sibi", "Zhob", "Loralai",
        "Dera Murad Jamali", "Kharan", "Mastung", "Nushki", "Pasni",
    ],
    "Islamabad Capital Territory": ["Islamabad"],
    "Gilgit-Baltistan": ["Gilgit", "Skardu", "Chilas", "Hunza", "Ghanche", "Astore"],
    "Azad Jammu and Kashmir": [
        "Muzaffarabad", "Mirpur", "Kotli", "Bhimber", "Rawalakot", "Bagh", "Pallandri", "Hattian Bala",
    ],
}
