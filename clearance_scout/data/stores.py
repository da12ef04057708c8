"""Static store location datasets, loaded once at startup."""

HOME_DEPOT = "home-depot"
ACE_HARDWARE = "ace-hardware"

HOME_DEPOT_STORES = [
    {"id": "HD-0206", "store_number": "0206", "name": "HD Southland", "address": "600 Citadel Dr", "city": "Los Angeles", "state": "CA", "zip_code": "90040", "phone": "(323) 721-7020", "latitude": 34.0522, "longitude": -118.2437, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0208", "store_number": "0208", "name": "HD Hollywood", "address": "5600 Sunset Blvd", "city": "Hollywood", "state": "CA", "zip_code": "90028", "phone": "(323) 461-3303", "latitude": 34.0983, "longitude": -118.3267, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0210", "store_number": "0210", "name": "HD West LA", "address": "11240 Santa Monica Blvd", "city": "West Los Angeles", "state": "CA", "zip_code": "90025", "phone": "(310) 966-7550", "latitude": 34.0407, "longitude": -118.4612, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1234", "store_number": "1234", "name": "HD Manhattan", "address": "40 W 23rd St", "city": "New York", "state": "NY", "zip_code": "10010", "phone": "(212) 929-9571", "latitude": 40.7411, "longitude": -73.9897, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "HD-1235", "store_number": "1235", "name": "HD Brooklyn", "address": "23 3rd Ave", "city": "Brooklyn", "state": "NY", "zip_code": "11217", "phone": "(718) 832-8553", "latitude": 40.6781, "longitude": -73.9441, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1236", "store_number": "1236", "name": "HD Queens", "address": "124-04 31st Ave", "city": "Flushing", "state": "NY", "zip_code": "11354", "phone": "(718) 661-4608", "latitude": 40.7769, "longitude": -73.8370, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0456", "store_number": "0456", "name": "HD Lincoln Park", "address": "2665 N Elston Ave", "city": "Chicago", "state": "IL", "zip_code": "60647", "phone": "(773) 342-9200", "latitude": 41.9282, "longitude": -87.6870, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0457", "store_number": "0457", "name": "HD South Loop", "address": "1232 S Canal St", "city": "Chicago", "state": "IL", "zip_code": "60607", "phone": "(312) 733-1050", "latitude": 41.8661, "longitude": -87.6398, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0789", "store_number": "0789", "name": "HD Midtown", "address": "4400 N Freeway", "city": "Houston", "state": "TX", "zip_code": "77022", "phone": "(713) 691-0123", "latitude": 29.8095, "longitude": -95.3635, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0790", "store_number": "0790", "name": "HD Galleria", "address": "4201 Westheimer Rd", "city": "Houston", "state": "TX", "zip_code": "77027", "phone": "(713) 961-9725", "latitude": 29.7370, "longitude": -95.4638, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0912", "store_number": "0912", "name": "HD Central Phoenix", "address": "1645 W Northern Ave", "city": "Phoenix", "state": "AZ", "zip_code": "85021", "phone": "(602) 944-9600", "latitude": 33.5696, "longitude": -112.1004, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-0913", "store_number": "0913", "name": "HD Scottsdale", "address": "16849 N 83rd Ave", "city": "Scottsdale", "state": "AZ", "zip_code": "85260", "phone": "(480) 596-0720", "latitude": 33.6405, "longitude": -111.9595, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1112", "store_number": "1112", "name": "HD Center City", "address": "1651 E Moyamensing Ave", "city": "Philadelphia", "state": "PA", "zip_code": "19148", "phone": "(215) 462-8600", "latitude": 39.9237, "longitude": -75.1580, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1113", "store_number": "1113", "name": "HD Northeast Philly", "address": "7849 Frankford Ave", "city": "Philadelphia", "state": "PA", "zip_code": "19136", "phone": "(215) 333-0879", "latitude": 40.0427, "longitude": -75.0327, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1314", "store_number": "1314", "name": "HD Alamo Heights", "address": "4821 Broadway St", "city": "San Antonio", "state": "TX", "zip_code": "78209", "phone": "(210) 829-8300", "latitude": 29.4760, "longitude": -98.4724, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1315", "store_number": "1315", "name": "HD Westside", "address": "6539 W Loop 1604 N", "city": "San Antonio", "state": "TX", "zip_code": "78254", "phone": "(210) 688-9070", "latitude": 29.5927, "longitude": -98.6156, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1516", "store_number": "1516", "name": "HD Mission Valley", "address": "2470 Home Depot Way", "city": "San Diego", "state": "CA", "zip_code": "92108", "phone": "(619) 278-7050", "latitude": 32.7549, "longitude": -117.1356, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1517", "store_number": "1517", "name": "HD Clairemont", "address": "3825 Clairemont Dr", "city": "San Diego", "state": "CA", "zip_code": "92117", "phone": "(858) 279-7050", "latitude": 32.8297, "longitude": -117.1989, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1718", "store_number": "1718", "name": "HD Downtown Dallas", "address": "5251 Alpha Rd", "city": "Dallas", "state": "TX", "zip_code": "75240", "phone": "(972) 991-8400", "latitude": 32.9537, "longitude": -96.7984, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1719", "store_number": "1719", "name": "HD Plano", "address": "1717 N Central Expy", "city": "Plano", "state": "TX", "zip_code": "75075", "phone": "(972) 423-7050", "latitude": 33.0198, "longitude": -96.6989, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1920", "store_number": "1920", "name": "HD San Jose Central", "address": "3555 Union Ave", "city": "San Jose", "state": "CA", "zip_code": "95124", "phone": "(408) 559-1050", "latitude": 37.3019, "longitude": -121.9398, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-1921", "store_number": "1921", "name": "HD Sunnyvale", "address": "1177 W El Camino Real", "city": "Sunnyvale", "state": "CA", "zip_code": "94087", "phone": "(408) 737-0900", "latitude": 37.3713, "longitude": -122.0678, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-2122", "store_number": "2122", "name": "HD South Austin", "address": "9725 S IH 35", "city": "Austin", "state": "TX", "zip_code": "78748", "phone": "(512) 292-1050", "latitude": 30.2048, "longitude": -97.7891, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-2123", "store_number": "2123", "name": "HD North Austin", "address": "12506 Research Blvd", "city": "Austin", "state": "TX", "zip_code": "78759", "phone": "(512) 257-4050", "latitude": 30.4013, "longitude": -97.7504, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-3201", "store_number": "3201", "name": "HD Orlando Downtown", "address": "1830 E Colonial Dr", "city": "Orlando", "state": "FL", "zip_code": "32803", "phone": "(407) 895-7020", "latitude": 28.5384, "longitude": -81.3037, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-3202", "store_number": "3202", "name": "HD Orlando South", "address": "4500 S Orange Blossom Trl", "city": "Orlando", "state": "FL", "zip_code": "32839", "phone": "(407) 851-0123", "latitude": 28.4817, "longitude": -81.3781, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-3203", "store_number": "3203", "name": "HD Winter Park", "address": "3200 Aloma Ave", "city": "Winter Park", "state": "FL", "zip_code": "32792", "phone": "(407) 677-5500", "latitude": 28.5933, "longitude": -81.3412, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-3204", "store_number": "3204", "name": "HD Altamonte Springs", "address": "1017 E Altamonte Dr", "city": "Altamonte Springs", "state": "FL", "zip_code": "32701", "phone": "(407) 862-7050", "latitude": 28.6611, "longitude": -81.3656, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-2324", "store_number": "2324", "name": "HD Southside", "address": "10251 Southside Blvd", "city": "Jacksonville", "state": "FL", "zip_code": "32256", "phone": "(904) 641-1050", "latitude": 30.2350, "longitude": -81.5619, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
    {"id": "HD-2325", "store_number": "2325", "name": "HD Westside", "address": "5400 Normandy Blvd", "city": "Jacksonville", "state": "FL", "zip_code": "32205", "phone": "(904) 781-1050", "latitude": 30.3358, "longitude": -81.7584, "store_hours": "Mon-Sat: 6AM-10PM, Sun: 8AM-8PM", "is_active": True},
]

ACE_HARDWARE_STORES = [
    {"id": "ACE-001", "store_number": "001", "name": "Ace Hardware Downtown LA", "address": "825 S Flower St", "city": "Los Angeles", "state": "CA", "zip_code": "90017", "phone": "(213) 629-3434", "latitude": 34.0489, "longitude": -118.2618, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-002", "store_number": "002", "name": "Ace Hardware Hollywood", "address": "5969 Melrose Ave", "city": "Hollywood", "state": "CA", "zip_code": "90038", "phone": "(323) 466-7191", "latitude": 34.0836, "longitude": -118.3089, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-003", "store_number": "003", "name": "Ace Hardware Santa Monica", "address": "1533 Lincoln Blvd", "city": "Santa Monica", "state": "CA", "zip_code": "90401", "phone": "(310) 458-6262", "latitude": 34.0194, "longitude": -118.4912, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-004", "store_number": "004", "name": "Ace Hardware Pasadena", "address": "2901 E Colorado Blvd", "city": "Pasadena", "state": "CA", "zip_code": "91107", "phone": "(626) 796-2273", "latitude": 34.1478, "longitude": -118.1091, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-101", "store_number": "101", "name": "Ace Hardware Manhattan", "address": "442 W 14th St", "city": "New York", "state": "NY", "zip_code": "10014", "phone": "(212) 924-3544", "latitude": 40.7409, "longitude": -74.0030, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-102", "store_number": "102", "name": "Ace Hardware Brooklyn Heights", "address": "147 Court St", "city": "Brooklyn", "state": "NY", "zip_code": "11201", "phone": "(718) 875-5890", "latitude": 40.6890, "longitude": -73.9924, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-103", "store_number": "103", "name": "Ace Hardware Queens", "address": "37-21 Northern Blvd", "city": "Long Island City", "state": "NY", "zip_code": "11101", "phone": "(718) 729-8765", "latitude": 40.7505, "longitude": -73.9298, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-104", "store_number": "104", "name": "Ace Hardware Bronx", "address": "2844 Third Ave", "city": "Bronx", "state": "NY", "zip_code": "10455", "phone": "(718) 292-6543", "latitude": 40.8176, "longitude": -73.9182, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-201", "store_number": "201", "name": "Ace Hardware Lincoln Park", "address": "2468 N Lincoln Ave", "city": "Chicago", "state": "IL", "zip_code": "60614", "phone": "(773) 348-8090", "latitude": 41.9276, "longitude": -87.6369, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-202", "store_number": "202", "name": "Ace Hardware Wicker Park", "address": "1532 N Milwaukee Ave", "city": "Chicago", "state": "IL", "zip_code": "60622", "phone": "(773) 235-4567", "latitude": 41.9085, "longitude": -87.6776, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-203", "store_number": "203", "name": "Ace Hardware River North", "address": "400 N Wells St", "city": "Chicago", "state": "IL", "zip_code": "60654", "phone": "(312) 644-7788", "latitude": 41.8906, "longitude": -87.6340, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-301", "store_number": "301", "name": "Ace Hardware Montrose", "address": "1533 Westheimer Rd", "city": "Houston", "state": "TX", "zip_code": "77006", "phone": "(713) 528-0808", "latitude": 29.7429, "longitude": -95.3905, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-302", "store_number": "302", "name": "Ace Hardware Heights", "address": "1014 W 19th St", "city": "Houston", "state": "TX", "zip_code": "77008", "phone": "(713) 864-7676", "latitude": 29.8016, "longitude": -95.4103, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-303", "store_number": "303", "name": "Ace Hardware Rice Village", "address": "2529 Rice Blvd", "city": "Houston", "state": "TX", "zip_code": "77005", "phone": "(713) 668-4444", "latitude": 29.7179, "longitude": -95.4134, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-401", "store_number": "401", "name": "Ace Hardware Central Phoenix", "address": "3402 N 7th St", "city": "Phoenix", "state": "AZ", "zip_code": "85014", "phone": "(602) 274-4545", "latitude": 33.4734, "longitude": -112.0620, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-402", "store_number": "402", "name": "Ace Hardware Scottsdale", "address": "4811 N Scottsdale Rd", "city": "Scottsdale", "state": "AZ", "zip_code": "85251", "phone": "(480) 946-7890", "latitude": 33.5061, "longitude": -111.9260, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-403", "store_number": "403", "name": "Ace Hardware Tempe", "address": "1919 E Apache Blvd", "city": "Tempe", "state": "AZ", "zip_code": "85281", "phone": "(480) 967-5432", "latitude": 33.4147, "longitude": -111.9093, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-501", "store_number": "501", "name": "Ace Hardware Center City", "address": "1532 South St", "city": "Philadelphia", "state": "PA", "zip_code": "19146", "phone": "(215) 546-5467", "latitude": 39.9445, "longitude": -75.1677, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-502", "store_number": "502", "name": "Ace Hardware Northern Liberties", "address": "990 Spring Garden St", "city": "Philadelphia", "state": "PA", "zip_code": "19123", "phone": "(215) 627-8899", "latitude": 39.9619, "longitude": -75.1484, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-601", "store_number": "601", "name": "Ace Hardware Alamo Heights", "address": "4903 Broadway St", "city": "San Antonio", "state": "TX", "zip_code": "78209", "phone": "(210) 824-3344", "latitude": 29.4778, "longitude": -98.4715, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-602", "store_number": "602", "name": "Ace Hardware Southtown", "address": "1502 S Laredo St", "city": "San Antonio", "state": "TX", "zip_code": "78204", "phone": "(210) 534-9090", "latitude": 29.4077, "longitude": -98.5072, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-701", "store_number": "701", "name": "Ace Hardware Mission Hills", "address": "1334 Washington Pl", "city": "San Diego", "state": "CA", "zip_code": "92103", "phone": "(619) 291-7377", "latitude": 32.7486, "longitude": -117.1661, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-702", "store_number": "702", "name": "Ace Hardware La Jolla", "address": "8657 Villa La Jolla Dr", "city": "La Jolla", "state": "CA", "zip_code": "92037", "phone": "(858) 454-4444", "latitude": 32.8498, "longitude": -117.2478, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-801", "store_number": "801", "name": "Ace Hardware Deep Ellum", "address": "2803 Main St", "city": "Dallas", "state": "TX", "zip_code": "75226", "phone": "(214) 748-9898", "latitude": 32.7831, "longitude": -96.7849, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-802", "store_number": "802", "name": "Ace Hardware Plano", "address": "1720 K Ave", "city": "Plano", "state": "TX", "zip_code": "75074", "phone": "(972) 423-1234", "latitude": 33.0198, "longitude": -96.6989, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-803", "store_number": "803", "name": "Ace Hardware Uptown Dallas", "address": "2914 McKinney Ave", "city": "Dallas", "state": "TX", "zip_code": "75204", "phone": "(214) 855-7676", "latitude": 32.8013, "longitude": -96.7903, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-901", "store_number": "901", "name": "Ace Hardware Downtown San Jose", "address": "87 N San Pedro St", "city": "San Jose", "state": "CA", "zip_code": "95110", "phone": "(408) 292-4444", "latitude": 37.3382, "longitude": -121.8863, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-902", "store_number": "902", "name": "Ace Hardware Sunnyvale", "address": "1177 W El Camino Real", "city": "Sunnyvale", "state": "CA", "zip_code": "94087", "phone": "(408) 737-5555", "latitude": 37.3713, "longitude": -122.0678, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1001", "store_number": "1001", "name": "Ace Hardware South Austin", "address": "1700 S Lamar Blvd", "city": "Austin", "state": "TX", "zip_code": "78704", "phone": "(512) 444-7777", "latitude": 30.2515, "longitude": -97.7697, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1002", "store_number": "1002", "name": "Ace Hardware East Austin", "address": "2904 E 6th St", "city": "Austin", "state": "TX", "zip_code": "78702", "phone": "(512) 478-8888", "latitude": 30.2654, "longitude": -97.7208, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1101", "store_number": "1101", "name": "Ace Hardware Riverside", "address": "2912 Park St", "city": "Jacksonville", "state": "FL", "zip_code": "32205", "phone": "(904) 384-9999", "latitude": 30.3199, "longitude": -81.6826, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1102", "store_number": "1102", "name": "Ace Hardware Atlantic Beach", "address": "421 1st St", "city": "Atlantic Beach", "state": "FL", "zip_code": "32233", "phone": "(904) 249-4455", "latitude": 30.3319, "longitude": -81.3975, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1201", "store_number": "1201", "name": "Ace Hardware Capitol Hill", "address": "1501 E Madison St", "city": "Seattle", "state": "WA", "zip_code": "98122", "phone": "(206) 323-7777", "latitude": 47.6131, "longitude": -122.3090, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1202", "store_number": "1202", "name": "Ace Hardware Fremont", "address": "4214 Fremont Ave N", "city": "Seattle", "state": "WA", "zip_code": "98103", "phone": "(206) 633-1234", "latitude": 47.6606, "longitude": -122.3491, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1301", "store_number": "1301", "name": "Ace Hardware LoHi", "address": "2011 W 32nd Ave", "city": "Denver", "state": "CO", "zip_code": "80211", "phone": "(303) 477-3333", "latitude": 39.7584, "longitude": -105.0178, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1302", "store_number": "1302", "name": "Ace Hardware Cherry Creek", "address": "201 University Blvd", "city": "Denver", "state": "CO", "zip_code": "80206", "phone": "(303) 321-5555", "latitude": 39.7135, "longitude": -104.9577, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1401", "store_number": "1401", "name": "Ace Hardware South Beach", "address": "1628 Alton Rd", "city": "Miami Beach", "state": "FL", "zip_code": "33139", "phone": "(305) 534-8888", "latitude": 25.7823, "longitude": -80.1394, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1402", "store_number": "1402", "name": "Ace Hardware Coconut Grove", "address": "3015 Grand Ave", "city": "Miami", "state": "FL", "zip_code": "33133", "phone": "(305) 448-6666", "latitude": 25.7282, "longitude": -80.2416, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1501", "store_number": "1501", "name": "Ace Hardware Music Row", "address": "1707 Division St", "city": "Nashville", "state": "TN", "zip_code": "37203", "phone": "(615) 327-4444", "latitude": 36.1506, "longitude": -86.8025, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1502", "store_number": "1502", "name": "Ace Hardware Green Hills", "address": "2126 Abbott Martin Rd", "city": "Nashville", "state": "TN", "zip_code": "37215", "phone": "(615) 383-7777", "latitude": 36.1034, "longitude": -86.8186, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1601", "store_number": "1601", "name": "Ace Hardware Virginia Highland", "address": "1174 N Highland Ave NE", "city": "Atlanta", "state": "GA", "zip_code": "30306", "phone": "(404) 876-5432", "latitude": 33.7738, "longitude": -84.3554, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1602", "store_number": "1602", "name": "Ace Hardware Buckhead", "address": "3637 Peachtree Rd NE", "city": "Atlanta", "state": "GA", "zip_code": "30319", "phone": "(404) 237-9999", "latitude": 33.8434, "longitude": -84.3782, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1701", "store_number": "1701", "name": "Ace Hardware Pearl District", "address": "1122 NW Couch St", "city": "Portland", "state": "OR", "zip_code": "97209", "phone": "(503) 228-3333", "latitude": 45.5236, "longitude": -122.6815, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1702", "store_number": "1702", "name": "Ace Hardware Hawthorne", "address": "3045 SE Hawthorne Blvd", "city": "Portland", "state": "OR", "zip_code": "97214", "phone": "(503) 238-7777", "latitude": 45.5122, "longitude": -122.6347, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1801", "store_number": "1801", "name": "Ace Hardware Back Bay", "address": "133 Newbury St", "city": "Boston", "state": "MA", "zip_code": "02116", "phone": "(617) 267-4444", "latitude": 42.3505, "longitude": -71.0772, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
    {"id": "ACE-1802", "store_number": "1802", "name": "Ace Hardware Cambridge", "address": "2067 Massachusetts Ave", "city": "Cambridge", "state": "MA", "zip_code": "02140", "phone": "(617) 354-8888", "latitude": 42.3875, "longitude": -71.1190, "store_hours": "Mon-Sat: 7AM-9PM, Sun: 8AM-7PM", "is_active": True},
]


def store_records(chain: str | None = None) -> list[dict]:
    """Store rows ready for seeding, tagged with their chain."""
    datasets = {HOME_DEPOT: HOME_DEPOT_STORES, ACE_HARDWARE: ACE_HARDWARE_STORES}
    chains = [chain] if chain else list(datasets)
    return [
        {**record, "chain": name}
        for name in chains
        for record in datasets.get(name, [])
    ]
