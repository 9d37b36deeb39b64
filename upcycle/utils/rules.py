# =============================================
# File: upcycle/utils/rules.py
# Purpose: Category rule table + generic templates used by the idea synthesizer
# =============================================
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from upcycle.schemas import CategoryRuleSet

MATERIAL_TYPES: Tuple[str, ...] = (
    "Plastic", "Paper", "Glass", "Metal", "Textile", "Electronic",
    "Organic", "Wood", "Cardboard", "Rubber", "Composite",
)

# Representative items, used when only a material is given
MATERIAL_ITEMS: Dict[str, List[str]] = {
    "Plastic": ["Plastic Bottle", "Plastic Container", "Plastic Bag", "Plastic Toy", "Plastic Utensil"],
    "Paper": ["Newspaper", "Magazine", "Printer Paper", "Paper Bag", "Gift Wrap"],
    "Glass": ["Glass Bottle", "Glass Jar", "Mason Jar", "Glass Container", "Glass Cup"],
    "Metal": ["Aluminum Can", "Tin Can", "Metal Container", "Metal Lid", "Foil"],
    "Textile": ["Old T-shirt", "Jeans", "Bedsheet", "Curtain", "Towel"],
    "Electronic": ["Old Phone", "Computer Parts", "Cables", "Batteries", "Remote Controller"],
    "Organic": ["Food Scraps", "Coffee Grounds", "Eggshells", "Fruit Peels", "Yard Waste"],
    "Wood": ["Wood Scraps", "Pallet", "Wooden Furniture", "Wooden Toy", "Chopsticks"],
    "Cardboard": ["Cardboard Box", "Cereal Box", "Toilet Paper Roll", "Egg Carton", "Cardboard Tube"],
    "Rubber": ["Old Tire", "Rubber Band", "Flip Flops", "Rubber Gloves", "Rubber Mat"],
    "Composite": ["Tetra Pak", "Coffee Cup", "Chip Bag", "Toothpaste Tube", "Disposable Diaper"],
}
FALLBACK_ITEM = "Generic Item"


def _steps(*lines: str) -> str:
    return "\n".join(f"Step {i}: {ln}" for i, ln in enumerate(lines, start=1))


# Declaration order is match priority (first hit wins)
CATEGORY_RULES: Tuple[CategoryRuleSet, ...] = (
    CategoryRuleSet(
        name="mason jar",
        keywords=["mason jar", "glass jar"],
        titles=[
            "Mason Jar Indoor Herb Garden",
            "Mason Jar Hanging Wall Planter",
            "Mason Jar Bathroom Organizer Set",
            "Mason Jar Pendant Light",
            "Mason Jar Kitchen Utensil Holder",
            "Mason Jar Sewing Kit Organizer",
            "Layered Sand Art Mason Jar",
            "Mason Jar Terrarium Ecosystem",
        ],
        suggestions=[
            "Remove the metal lid from the jar, but keep the rim for some projects",
            "Spray paint the jar with frosted glass paint for a diffused light effect",
            "For the pendant light, use a lamp cord kit with an E26 socket that fits inside the jar opening",
            "Drill drainage holes in the bottom of the jar for plant-based projects using a diamond drill bit",
            "Secure multiple jars to a wooden plank for a bathroom organizer or wall planter",
            "Use copper wire to create hanging mechanisms for the jars",
            "Line the inside with contact paper for a decorative effect",
            "For kitchen organizers, group 3-4 jars together on a rotating base",
        ],
        instructions=_steps(
            "Thoroughly clean your mason jar and remove the lid (keep the rim).",
            "Using a hammer and nail, carefully punch a hole in the center of the lid.",
            "Thread your pendant light cord through this hole from inside the lid.",
            "Secure the socket to the lid following the kit instructions.",
            "Select a decorative Edison bulb that will fit inside the jar.",
            "Screw the rim back onto the jar with the light assembly.",
            "Test the light to ensure it works properly.",
            "Hang your new pendant light using secure mounting hardware.",
            "Adjust the cord length as needed for your space.",
        ),
        tags=["Mason Jar", "Kitchen", "Lighting", "Home Decor", "Upcycle", "Farmhouse Style", "Functional"],
        image_keywords="mason+jar+pendant+light",
        difficulty_level=3,
        time_required=45,
    ),
    CategoryRuleSet(
        name="plastic bottle",
        keywords=["plastic bottle"],
        titles=[
            "Plastic Bottle Self-Watering Planter",
            "Plastic Bottle Bird Feeder Station",
            "Plastic Bottle Desk Organizer",
            "Plastic Bottle Wind Spinner",
            "Plastic Bottle Herb Garden Tower",
            "Plastic Bottle Drip Irrigation System",
            "Plastic Bottle Smartphone Amplifier",
            "Plastic Bottle Indoor Hydroponic Garden",
        ],
        suggestions=[
            "Cut the bottle horizontally to create two sections - the top will be inverted into the bottom section",
            "Use a heated nail to melt clean holes rather than cutting with scissors for cleaner results",
            "Add a wick made of cotton rope between the water reservoir and the soil",
            "For multi-bottle projects, use zip ties or hot glue to connect bottles securely",
            "Cover the exterior with rope wrapping for a natural look",
            "Use biodegradable paint for outdoor projects to minimize environmental impact",
            "For the hydroponic system, create holes for net pots in the bottle sides",
            "For the organizer, cut bottles at varying heights to hold different items",
        ],
        instructions=_steps(
            "Take a clean plastic bottle and cut it horizontally about 1/3 from the bottom.",
            "This bottom section will be your water reservoir.",
            "Take the top section and invert it so the bottle neck points downward.",
            "Insert a piece of cotton rope through the bottle neck to serve as a wick.",
            "Fill the inverted top section with potting soil, ensuring the wick extends up into the soil.",
            "Plant your seedling or seeds in the soil.",
            "Fill the bottom reservoir with water.",
            "Place the soil-filled top section into the bottom reservoir, with the wick extending into the water.",
            "As the soil dries out, it will draw water up through the wick, keeping your plants watered for days.",
        ),
        tags=["Gardening", "Self-Watering", "Indoor Plants", "Plastic Upcycle", "Sustainable", "Hydroponic", "Zero Waste"],
        image_keywords="plastic+bottle+self+watering+planter",
        difficulty_level=2,
        time_required=30,
    ),
    CategoryRuleSet(
        name="glass bottle",
        keywords=["glass bottle"],
        titles=[
            "Glass Bottle Tiki Torch",
            "Bottle Fairy Light Lamp",
            "Wine Bottle Herb Garden",
            "Glass Bottle Soap Dispenser",
            "Bottle Terrarium Garden",
            "Layered Sand Art Bottle",
            "Glass Bottle Bird Feeder",
            "Bottle Hanging Planter",
        ],
        suggestions=[
            "Use a bottle cutting kit to cleanly cut glass bottles for certain projects",
            "Add copper or LED string lights inside bottles for beautiful lighting effects",
            "For outdoor projects, use weather-resistant materials and sealants",
            "Consider etching designs onto the glass surface with etching cream",
            "Use wine bottles with interesting shapes or colors for more decorative projects",
            "Add a pour spout for bottles repurposed as oil or soap dispensers",
            "For terrariums, layer activated charcoal, soil, and decorative stones",
            "Use a glass drill bit with water to safely drill drainage holes",
        ],
        instructions=_steps(
            "Clean your glass bottle thoroughly and remove all labels.",
            "For the Fairy Light Lamp, ensure the bottle is completely dry inside.",
            "Insert a string of 20-30 LED fairy lights into the bottle.",
            "Arrange the cord so it exits the bottle mouth neatly.",
            "Secure the battery pack discreetly near the bottle base or hide it.",
            "Optionally, add decorative elements like sea glass or colored stones in the bottom.",
            "Place in your desired location and adjust the light arrangement inside.",
            "For an extra touch, wrap copper wire around the bottle neck as decoration.",
            "Turn on the lights and enjoy your upcycled bottle lamp.",
        ),
        tags=["Glass Upcycle", "Lighting", "Home Decor", "Sustainable", "Bottle Craft", "Mood Lighting", "Gift Idea"],
        image_keywords="glass+bottle+fairy+lights",
        difficulty_level=1,
        time_required=15,
    ),
    CategoryRuleSet(
        name="cardboard",
        keywords=["cardboard", "box"],
        titles=[
            "Cardboard Roll-Top Desk Organizer",
            "Multi-Compartment Shoe Storage System",
            "Cardboard Cable Management Station",
            "Cardboard Floating Wall Shelves",
            "Cardboard Bedside Caddy",
            "Honeycomb Modular Storage Unit",
            "Cardboard Under-Bed Rolling Storage",
            "Cardboard Drawer Divider System",
        ],
        suggestions=[
            "Use packing tape to reinforce all folds and corners for durability",
            "Apply several thin coats of acrylic paint instead of one thick coat to prevent warping",
            "Add drawer pulls made from wine corks, wooden beads, or cabinet knobs",
            "Create a template before cutting to ensure precise, matching pieces",
            "Use wood glue rather than white glue for stronger bonds between cardboard pieces",
            "Apply a clear polyurethane spray to seal and waterproof the finished product",
            "Add caster wheels to the bottom of storage units for mobility",
            "Line the inside with decorative paper or fabric for a finished look",
        ],
        instructions=_steps(
            "Collect 6-8 same-sized cardboard boxes (shipping boxes work well).",
            "Cut off the top and bottom flaps from each box.",
            "Measure and mark 2-inch tabs along each open edge.",
            "Score and fold these tabs inward.",
            "Apply wood glue to the tabs and connect the boxes in a honeycomb pattern.",
            "Reinforce all connections with packing tape on the inside.",
            "Apply primer to the entire unit, then paint with your choice of colors.",
            "Once dry, apply 2-3 coats of clear polyurethane spray for durability.",
            "Mount to the wall using L-brackets, or leave freestanding.",
        ),
        tags=["Organization", "Home Storage", "Cardboard Furniture", "DIY", "Eco-friendly", "Modular", "Wall Mount"],
        image_keywords="honeycomb+cardboard+shelf",
        difficulty_level=4,
        time_required=120,
    ),
    CategoryRuleSet(
        name="t-shirt",
        keywords=["t-shirt", "shirt", "textile"],
        titles=[
            "No-Sew T-shirt Market Bag",
            "T-shirt Memory Quilt",
            "Braided T-shirt Rug",
            "T-shirt Yarn Plant Hanger",
            "T-shirt Pillow Cover Set",
            "T-shirt Produce Bags",
            "Knotted T-shirt Wall Hanging",
            "T-shirt Dog Toy Collection",
        ],
        suggestions=[
            "Use sharp fabric scissors for clean cuts without stretching the material",
            "For t-shirt yarn projects, cut shirts into continuous spirals to maximize length",
            "Pre-wash all shirts before starting to prevent shrinkage later",
            "Use iron-on interfacing on the back of special shirts for quilting to preserve prints",
            "Tie tight square knots for no-sew projects to prevent unraveling",
            "Use matching color threads when sewing to make seams less visible",
            "Reinforce handles on bags with double stitching or extra layers",
            "Spray light starch on completed fabric items for a crisper finish",
        ],
        instructions=_steps(
            "Start with a clean, unwanted t-shirt.",
            "Lay it flat and cut off the sleeves along the seams.",
            "Cut out the neckline, making the opening wider - this will be the top of your bag.",
            "Turn the shirt inside out.",
            "Using fabric scissors, cut fringe strips along the bottom of the shirt, about 3-4 inches long and 1 inch wide.",
            "Tie each fringe strip to the one next to it using double knots, working your way across the entire bottom.",
            "Once all strips are tied, turn the shirt right-side out.",
            "Trim any uneven edges or loose threads.",
            "Your market bag is ready to use for groceries, gym clothes, or beach essentials.",
        ),
        tags=["No-Sew", "T-shirt Upcycle", "Shopping Bag", "Eco-friendly", "Zero Waste", "Textile Reuse", "Beginner Friendly"],
        image_keywords="tshirt+tote+bag+upcycled",
        difficulty_level=1,
        time_required=15,
    ),
    CategoryRuleSet(
        name="metal can",
        keywords=["aluminum can", "tin can", "metal can"],
        titles=[
            "Aluminum Can Lantern Set",
            "Tin Can Desk Organizer Caddy",
            "Industrial Tin Can Lamp",
            "Can Herb Garden Row Markers",
            "Mini Can Succulent Planters",
            "Can Wind Chimes Mobile",
            "Aluminum Can Rose Garden Stakes",
            "Upcycled Can Kitchen Utensil Holder",
        ],
        suggestions=[
            "Use a nail and hammer to punch decorative patterns for light to shine through",
            "File or sand all cut edges to prevent injuries",
            "Apply a clear coat sealer to prevent rusting on outdoor projects",
            "Remove paper labels with warm soapy water and baking soda paste",
            "For planters, punch drainage holes in the bottom using a nail",
            "Use spray paint designed for metal surfaces for best adhesion",
            "When cutting cans, wear gloves to protect against sharp edges",
            "Add a copper wire rim at the top of cans for a decorative finish",
        ],
        instructions=_steps(
            "Begin with a clean, label-free large tin can (coffee cans work well).",
            "Using a drill with a 1/8-inch metal bit, carefully drill a hole in the center of the bottom for the cord.",
            "Mark and drill decorative patterns on the sides of the can using increasingly larger drill bits.",
            "Sand any sharp edges to make them smooth and safe.",
            "Clean out any metal shavings.",
            "Spray paint the exterior with metallic or matte black spray paint designed for metal.",
            "Insert a pendant light kit through the bottom hole, securing the socket inside the can.",
            "Add an Edison bulb for the perfect industrial look.",
            "Mount on a wooden base for stability, or attach chain or rope to create a hanging pendant.",
        ),
        tags=["Industrial", "Lighting", "Metal Upcycle", "Home Decor", "Rustic", "Functional", "Sustainable Design"],
        image_keywords="tin+can+lamp+industrial",
        difficulty_level=3,
        time_required=60,
    ),
    CategoryRuleSet(
        name="pallet",
        keywords=["pallet", "wood"],
        titles=[
            "Pallet Vertical Herb Garden",
            "Rustic Pallet Coffee Table with Storage",
            "Pallet Outdoor Sofa with Cushions",
            "Pallet Wall-Mounted Wine Rack",
            "Pallet Wood Floating Shelves",
            "Pallet Bed Frame with Under-Lighting",
            "Pallet Outdoor Path Tiles",
            "Pallet Wood Bathroom Organizer",
        ],
        suggestions=[
            "Use a pry bar instead of a hammer to disassemble pallets with minimal wood damage",
            "Sand all wood thoroughly to prevent splinters, starting with coarse and finishing with fine grit",
            "Apply wood conditioner before staining for more even color absorption",
            "Use a vinegar and steel wool solution for an instant weathered gray look",
            "Check pallets for the HT stamp (heat-treated) which indicates safe, non-chemical treatment",
            "Drill pilot holes to prevent wood from splitting when adding screws",
            "Apply several coats of polyurethane for outdoor projects to protect against elements",
            "Use wood glue in addition to screws for stronger joints",
        ],
        instructions=_steps(
            "Start with two clean, heat-treated pallets (look for the HT stamp).",
            "Sand all surfaces thoroughly, starting with 80-grit and working up to 220-grit sandpaper.",
            "Apply wood conditioner, then stain in your choice of color.",
            "Once dry, apply three coats of polyurethane, sanding lightly between coats.",
            "Stack the pallets with the bottom one upside-down to create a storage compartment.",
            "Secure together using 3-inch wood screws at each corner.",
            "Add caster wheels to the bottom for mobility, screwing directly into the thicker support beams.",
            "Cut a piece of plywood to size for the top surface, sand, stain, and seal to match.",
            "Attach with screws from underneath and add wooden crates inside for optional storage.",
        ),
        tags=["Pallet Furniture", "Living Room", "Rustic", "Storage Solution", "Wood Upcycle", "DIY Furniture", "Sustainable"],
        image_keywords="pallet+coffee+table+rustic",
        difficulty_level=4,
        time_required=180,
    ),
    CategoryRuleSet(
        name="toilet paper roll",
        keywords=["toilet paper roll", "paper tube"],
        titles=[
            "Toilet Paper Roll Seed Starter Pots",
            "Cardboard Tube Desk Organizer",
            "Decorative Wall Art from Paper Tubes",
            "Toilet Paper Roll Fire Starters",
            "Cardboard Roll Advent Calendar",
            "Paper Tube Cable Organizers",
            "Bathroom Wall Shelf from Tubes",
            "Cardboard Tube Bird Feeder",
        ],
        suggestions=[
            "Cut tubes into even ring sections for uniform pieces in artwork",
            "Use modge podge or clear acrylic spray to seal cardboard and prevent warping",
            "Group and glue tubes together to create strength through numbers",
            "Paint tubes before assembly for easier coverage",
            "When using for plants, make sure to cut slits at the bottom for drainage",
            "For fire starters, dip in melted wax for longer burn time",
            "Use a paper punch to create decorative patterns in tube sides",
            "Flatten tubes and cut into strips for weaving projects",
        ],
        instructions=_steps(
            "Collect 15-20 empty toilet paper rolls.",
            "For each roll, make four 1-inch cuts on one end, spaced evenly around the circumference.",
            "Fold these cut sections inward like closing a box, tucking the last flap under the first to secure the bottom.",
            "Paint the exterior with non-toxic paint if desired, or leave natural.",
            "Fill each pot with seed starting soil to about 3/4 full.",
            "Plant your seeds according to package directions, usually 1/4 inch deep.",
            "Water gently and place in a sunny window or under grow lights.",
            "When seedlings are ready to transplant, plant the entire biodegradable pot in your garden.",
            "Label each pot with a popsicle stick marker for easy identification.",
        ),
        tags=["Gardening", "Seed Starting", "Biodegradable", "Zero Waste", "Spring Project", "Cardboard Upcycle", "Kid-Friendly"],
        image_keywords="toilet+paper+roll+seed+starters",
        difficulty_level=1,
        time_required=30,
    ),
    CategoryRuleSet(
        name="newspaper",
        keywords=["newspaper", "magazine"],
        titles=[
            "Newspaper Gift Basket with Handle",
            "Magazine Page Coasters Set",
            "Woven Magazine Page Placemat",
            "Newspaper Seedling Pots",
            "Rolled Magazine Photo Frame",
            "Waterproof Newspaper Produce Bags",
            "Magazine Page Beaded Necklace",
            "Newspaper Wall Art Typography",
        ],
        suggestions=[
            "Roll newspaper or magazine pages tightly around a skewer for strong building elements",
            "Seal finished paper crafts with clear acrylic spray for water resistance",
            "Select magazine pages with complementary colors for more attractive finished items",
            "Use a glue stick rather than liquid glue to prevent paper from wrinkling",
            "Cut uniform strips using a paper cutter for more professional results",
            "When weaving, alternate horizontal and vertical pieces for strength",
            "Use a bone folder to create crisp folds without damaging paper",
            "Apply mod podge between layers when laminating for a sturdy finish",
        ],
        instructions=_steps(
            "Select 20-30 full-size colorful magazine pages.",
            "Cut each page into long strips approximately 1/2 inch wide using a paper cutter.",
            "Take one strip and tightly roll it from one end to the other, adding a small dot of glue at the end.",
            "Continue rolling all your strips into tight coils.",
            "Arrange 7 coils in a circular pattern, with one in the center and six surrounding it.",
            "Use white glue to secure them together.",
            "Continue adding concentric circles of coils until you reach your desired coaster size.",
            "Coat both sides with three layers of mod podge, allowing drying time between coats.",
            "Finish with a clear acrylic spray sealer for water resistance and create a set of 4-6 coasters.",
        ),
        tags=["Paper Craft", "Home Decor", "Upcycled", "Coasters", "Eco-friendly", "Colorful", "Magazine Reuse"],
        image_keywords="magazine+coasters+recycled",
        difficulty_level=2,
        time_required=90,
    ),
    CategoryRuleSet(
        name="wine cork",
        keywords=["wine cork", "cork"],
        titles=[
            "Wine Cork Bulletin Board",
            "Cork Trivet Hot Pad",
            "Wine Cork Bath Mat",
            "Cork Succulent Magnets",
            "Wine Cork Keychain Floaters",
            "Cork Stamp Set",
            "Wine Cork Wreath",
            "Cork Drawer Knobs",
        ],
        suggestions=[
            "Slice corks lengthwise with a serrated knife for flat mosaic pieces",
            "Boil corks for 10 minutes to soften them before cutting",
            "Use hot glue for fast assembly and wood glue for projects that see heavy use",
            "Hollow out the center of a cork with a craft knife to hold a tiny succulent",
            "Glue a small magnet to the back of each cork for fridge decor",
            "Arrange corks in a herringbone pattern for a more polished look",
            "Carve simple shapes into the cork end to make custom stamps",
            "Seal finished cork surfaces with clear matte spray to resist stains",
        ],
        instructions=_steps(
            "Collect 40-60 wine corks and remove any foil or wax.",
            "Boil the corks for 10 minutes to soften them, then let them dry.",
            "Cut each cork in half lengthwise with a serrated knife.",
            "Choose a sturdy picture frame or a cut piece of plywood as a backing.",
            "Lay out the cork halves flat side down in your chosen pattern before gluing.",
            "Glue each half to the backing with wood glue, working row by row.",
            "Trim corks at the edges so they sit flush with the frame.",
            "Let the glue cure overnight under a light weight.",
            "Add hanging hardware to the back and pin up your notes.",
        ),
        tags=["Cork Craft", "Home Office", "Upcycle", "Kitchen", "Natural Material", "Gift Idea", "Zero Waste"],
        image_keywords="wine+cork+bulletin+board",
        difficulty_level=2,
        time_required=60,
    ),
    CategoryRuleSet(
        name="plastic bag",
        keywords=["plastic bag"],
        titles=[
            "Crocheted Plarn Tote Bag",
            "Fused Plastic Bag Pencil Pouch",
            "Plastic Bag Outdoor Doormat",
            "Woven Plarn Storage Basket",
            "Plastic Bag Jump Rope",
            "Fused Plastic Rain Poncho",
            "Plarn Sleeping Mat for Shelters",
            "Plastic Bag Pom-Pom Garland",
        ],
        suggestions=[
            "Flatten bags and cut off handles and bottom seams before making plarn",
            "Cut bags into loops and chain them together for a continuous strand of plastic yarn",
            "Fuse 6-8 layers of plastic between parchment paper with an iron on low heat",
            "Use a large crochet hook (size K or larger) for plarn projects",
            "Sort bags by color to plan stripes or patterns ahead of time",
            "Keep the iron moving when fusing to avoid holes and fumes",
            "Reinforce tote handles with a double row of stitches",
            "Work in a well-ventilated area when heating plastic",
        ],
        instructions=_steps(
            "Collect 30-40 clean, dry plastic bags.",
            "Flatten each bag and cut off the handles and the bottom seam.",
            "Cut the remaining tube into 1-inch wide loops.",
            "Link the loops together with slip knots to form a long strand of plarn.",
            "Roll the plarn into a ball to keep it from tangling.",
            "Crochet a flat oval base using single crochet stitches.",
            "Work upward in rounds to build the sides of the tote.",
            "Crochet two handles and attach them securely to opposite sides.",
            "Weave in loose ends and test the bag with a light load.",
        ),
        tags=["Plarn", "Crochet", "Plastic Upcycle", "Reusable Bag", "Zero Waste", "Textile Craft", "Sustainable"],
        image_keywords="plarn+crochet+tote+bag",
        difficulty_level=3,
        time_required=90,
    ),
    CategoryRuleSet(
        name="umbrella",
        keywords=["umbrella"],
        titles=[
            "Umbrella Fabric Rain Tote",
            "Broken Umbrella Garden Trellis",
            "Umbrella Canopy Reusable Lunch Bag",
            "Umbrella Fabric Dog Raincoat",
            "Upside-Down Umbrella Hanging Planter",
            "Umbrella Spoke Wreath Frame",
            "Umbrella Fabric Bike Seat Cover",
            "Umbrella Wall Organizer Pocket",
        ],
        suggestions=[
            "Carefully unpick the canopy from the spokes to keep the fabric intact",
            "Umbrella fabric is water-resistant, so use it for anything that needs to stay dry",
            "Use pliers and wire cutters to remove and reshape the metal spokes",
            "Sew with a microtex needle to avoid tearing the thin nylon",
            "Use binder clips instead of pins to avoid holes in waterproof fabric",
            "Reuse the spokes as plant supports or trellis stakes",
            "Seal stitched seams with seam tape for full waterproofing",
            "Keep the handle for a hook or a coat rack peg",
        ],
        instructions=_steps(
            "Open the umbrella and snip the threads holding the canopy to each spoke tip.",
            "Remove the canopy from the center post and lay it flat.",
            "Cut the canopy into two matching rectangles for the bag body.",
            "Cut two long strips for handles and fold them lengthwise.",
            "Clip the rectangles right sides together with binder clips.",
            "Sew the sides and bottom with a straight stitch.",
            "Box the bottom corners so the tote stands upright.",
            "Attach the handles with a double row of stitches.",
            "Turn the tote right side out and seal the seams if needed.",
        ),
        tags=["Sewing", "Waterproof", "Textile Reuse", "Upcycle", "Accessories", "Repair Culture", "Zero Waste"],
        image_keywords="upcycled+umbrella+tote",
        difficulty_level=3,
        time_required=75,
    ),
)


# Secondary table keyed on words in the chosen title (first hit wins)
TITLE_INSTRUCTIONS: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (
        ("lamp", "light", "lantern"),
        (
            "Clean {item} thoroughly and remove any labels.",
            "Mark where you'll cut to create the lamp shape.",
            "Carefully cut the {item} using tools appropriate for {material}.",
            "Sand any rough edges for safety.",
            "Drill a hole for the cord if needed.",
            "Install a socket kit with cord according to manufacturer's instructions.",
            "Add decorative elements to the exterior of your lamp.",
            "Install an appropriate bulb for your lamp size.",
            "Test the lamp to ensure it works properly and safely.",
        ),
    ),
    (
        ("planter", "garden", "pot"),
        (
            "Clean {item} thoroughly.",
            "Drill or punch drainage holes in the bottom.",
            "Add a layer of gravel or pebbles at the bottom for drainage.",
            "Decorate the exterior with paint suitable for {material}.",
            "Allow paint to dry completely.",
            "Add potting soil leaving room at the top.",
            "Plant your chosen seeds or small plants.",
            "Water lightly and place in appropriate sunlight.",
            "Check soil moisture regularly and maintain as needed.",
        ),
    ),
    (
        ("storage", "organizer", "holder", "container"),
        (
            "Clean {item} thoroughly and remove any labels.",
            "Mark where you'll cut or modify the {item}.",
            "Cut or shape as needed for your organizer design.",
            "Sand any rough edges for safety.",
            "Create dividers if needed for organization.",
            "Paint or decorate the exterior to match your décor.",
            "Add labels if needed for easy identification.",
            "Apply a protective clear coat for durability.",
            "Install in your desired location and fill with items.",
        ),
    ),
    (
        ("wall", "art", "décor", "decor", "frame"),
        (
            "Clean {item} thoroughly.",
            "Sketch your design on paper first.",
            "Mark cutting or assembly lines on the {item}.",
            "Cut or shape as needed using appropriate tools.",
            "Sand rough edges for safety and appearance.",
            "Paint or decorate according to your design plan.",
            "Add hanging hardware to the back.",
            "Apply a protective clear coat if needed.",
            "Hang securely on your wall at the desired height.",
        ),
    ),
    (
        ("table", "chair", "bench", "stool", "furniture"),
        (
            "Clean {item} thoroughly.",
            "Create a design plan with measurements.",
            "Cut or shape the {item} as needed.",
            "Sand all surfaces thoroughly for safety.",
            "Join pieces together using appropriate fasteners or adhesives.",
            "Reinforce joints for stability.",
            "Apply paint, stain, or sealant suitable for {material}.",
            "Allow to dry completely between coats.",
            "Add any finishing touches like felt pads on the bottom.",
        ),
    ),
)

GENERIC_INSTRUCTIONS: Tuple[str, ...] = (
    "Clean {item} thoroughly before starting.",
    "Sketch your design for the {title} on paper.",
    "Gather all necessary tools and materials.",
    "Mark any cutting lines on the {item}.",
    "Carefully cut or modify the {item} according to your design.",
    "Sand any rough edges for safety and appearance.",
    "Paint or decorate as desired with materials suitable for {material}.",
    "Allow to dry completely.",
    "Add any final details or functional elements to complete your project.",
)

GENERIC_TITLES: Tuple[str, ...] = (
    "{item} Lamp",
    "{item} Storage Container",
    "{item} Wall Organizer",
    "{item} Planter Box",
    "{item} Desk Organizer",
)

GENERIC_SUGGESTIONS: Tuple[str, ...] = (
    "Clean the {item} thoroughly before starting",
    "Measure and mark cutting lines for your {title_lower}",
    "Carefully cut the {item} using appropriate tools for {material_lower}",
    "Sand rough edges to prevent injuries",
    "Apply a primer suitable for {material_lower} before painting",
    "Use a weatherproof sealant for outdoor projects",
    "Add rubber feet to the bottom to prevent scratching surfaces",
    "Install LED lights for illuminated projects",
    "Add decorative elements that complement your {title_lower}",
)

GENERIC_TAGS: Tuple[str, ...] = (
    "Upcycle", "Home Decor", "Functional", "Storage", "Gardening", "Organization", "DIY", "Eco-friendly",
)


def find_category(item_name: str) -> Optional[CategoryRuleSet]:
    """First rule whose keyword occurs in the item name, or None."""
    name = (item_name or "").lower()
    for rule in CATEGORY_RULES:
        if rule.matches(name):
            return rule
    return None


def instructions_for_title(item_name: str, material_type: str, idea_title: str) -> str:
    title_lower = idea_title.lower()
    steps = GENERIC_INSTRUCTIONS
    for words, template in TITLE_INSTRUCTIONS:
        if any(w in title_lower for w in words):
            steps = template
            break
    return _steps(*(s.format(item=item_name, material=material_type, title=idea_title) for s in steps))


def generic_titles(item_name: str) -> List[str]:
    return [t.format(item=item_name) for t in GENERIC_TITLES]


def generic_suggestions(item_name: str, material_type: str, idea_title: str) -> List[str]:
    return [
        s.format(
            item=item_name,
            title_lower=idea_title.lower(),
            material_lower=material_type.lower(),
        )
        for s in GENERIC_SUGGESTIONS
    ]


def generic_tags(material_type: str) -> List[str]:
    return list(GENERIC_TAGS) + [f"{material_type} Upcycle"]
