"""Curated book shelves.

Static reference data for browsing and offline search. Shelves are immutable:
tuples of frozen records inside read-only mappings.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .api.openlibrary import isbn_cover_url
from .schemas import BookCandidate, CandidateSource


@dataclass(frozen=True)
class CuratedBook:
    """A hand-picked book on a curated shelf."""

    title: str
    author: str
    isbn13: str

    @property
    def cover_url(self) -> str:
        return isbn_cover_url(self.isbn13, size="L")

    def to_candidate(self) -> BookCandidate:
        """Convert to a BookCandidate."""
        return BookCandidate(
            title=self.title,
            author=self.author,
            cover_url=self.cover_url,
            isbn13=self.isbn13,
            source=CandidateSource.CURATED,
        )


@dataclass(frozen=True)
class SeasonalTheme:
    key: str
    title: str


SHELVES: Mapping[str, tuple[CuratedBook, ...]] = MappingProxyType({
    "board": (
        CuratedBook("Goodnight Moon", "Margaret Wise Brown", "9780694003617"),
        CuratedBook("Brown Bear, Brown Bear, What Do You See?", "Bill Martin Jr.", "9780805047905"),
        CuratedBook("The Very Hungry Caterpillar", "Eric Carle", "9780399226908"),
        CuratedBook("Dear Zoo", "Rod Campbell", "9781416947370"),
        CuratedBook("Pat the Bunny", "Dorothy Kunhardt", "9780307120007"),
        CuratedBook("Moo, Baa, La La La!", "Sandra Boynton", "9780671449018"),
    ),
    "picture": (
        CuratedBook("Where the Wild Things Are", "Maurice Sendak", "9780060254926"),
        CuratedBook("The Snowy Day", "Ezra Jack Keats", "9780670654000"),
        CuratedBook("Corduroy", "Don Freeman", "9780140501735"),
        CuratedBook("Dragons Love Tacos", "Adam Rubin", "9780803736801"),
        CuratedBook("The Day the Crayons Quit", "Drew Daywalt", "9780399255373"),
        CuratedBook("Last Stop on Market Street", "Matt de la Peña", "9780399257742"),
    ),
    "chapter": (
        CuratedBook("Diary of a Wimpy Kid", "Jeff Kinney", "9780810993136"),
        CuratedBook("Dog Man", "Dav Pilkey", "9780545581608"),
        CuratedBook("Magic Tree House: Dinosaurs Before Dark", "Mary Pope Osborne", "9780679824114"),
        CuratedBook("Junie B. Jones and the Stupid Smelly Bus", "Barbara Park", "9780679826125"),
        CuratedBook("Ivy + Bean", "Annie Barrows", "9780811849098"),
        CuratedBook("The Bad Guys", "Aaron Blabey", "9780545912402"),
    ),
    "middlegrade": (
        CuratedBook("Percy Jackson: The Lightning Thief", "Rick Riordan", "9780786838653"),
        CuratedBook("Wonder", "R.J. Palacio", "9780375869020"),
        CuratedBook("Holes", "Louis Sachar", "9780374332662"),
        CuratedBook("The One and Only Ivan", "Katherine Applegate", "9780061992254"),
        CuratedBook("New Kid", "Jerry Craft", "9780062691194"),
        CuratedBook("Hatchet", "Gary Paulsen", "9781416936473"),
    ),
    "bestsellers": (
        CuratedBook("Cat Kid Comic Club", "Dav Pilkey", "9781338712766"),
        CuratedBook("The Wild Robot", "Peter Brown", "9780316381994"),
        CuratedBook("Wings of Fire: The Dragonet Prophecy", "Tui T. Sutherland", "9780545349185"),
        CuratedBook("The Notebook of Doom", "Troy Cummings", "9780545493239"),
        CuratedBook("Big Nate", "Lincoln Peirce", "9780061944345"),
        CuratedBook("Amulet: The Stonekeeper", "Kazu Kibuishi", "9780439846813"),
        CuratedBook("The One and Only Bob", "Katherine Applegate", "9780062991317"),
        CuratedBook("Front Desk", "Kelly Yang", "9781338157826"),
    ),
    "caldecott": (
        CuratedBook("The Snowy Day", "Ezra Jack Keats", "9780670654000"),
        CuratedBook("Where the Wild Things Are", "Maurice Sendak", "9780060254926"),
        CuratedBook("Owl Moon", "Jane Yolen", "9780399214578"),
        CuratedBook("Officer Buckle and Gloria", "Peggy Rathmann", "9780399226168"),
        CuratedBook("Kitten's First Full Moon", "Kevin Henkes", "9780060588281"),
        CuratedBook("A Ball for Daisy", "Chris Raschka", "9780375858611"),
        CuratedBook("Last Stop on Market Street", "Matt de la Peña", "9780399257742"),
        CuratedBook("The Lion & the Mouse", "Jerry Pinkney", "9780316013567"),
    ),
    "newbery": (
        CuratedBook("The Giver", "Lois Lowry", "9780544336261"),
        CuratedBook("Holes", "Louis Sachar", "9780374332662"),
        CuratedBook("Bridge to Terabithia", "Katherine Paterson", "9780064401845"),
        CuratedBook("Number the Stars", "Lois Lowry", "9780395510605"),
        CuratedBook("Walk Two Moons", "Sharon Creech", "9780064405171"),
        CuratedBook("When You Reach Me", "Rebecca Stead", "9780385737494"),
        CuratedBook("The Crossover", "Kwame Alexander", "9780544107717"),
        CuratedBook("Merci Suárez Changes Gears", "Meg Medina", "9780763690496"),
    ),
    "corettascottking": (
        CuratedBook("Brown Girl Dreaming", "Jacqueline Woodson", "9780399252518"),
        CuratedBook("The Watsons Go to Birmingham", "Christopher Paul Curtis", "9780440414124"),
        CuratedBook("Roll of Thunder, Hear My Cry", "Mildred D. Taylor", "9780140384512"),
        CuratedBook("Bud, Not Buddy", "Christopher Paul Curtis", "9780553494105"),
        CuratedBook("One Crazy Summer", "Rita Williams-Garcia", "9780060760908"),
        CuratedBook("New Kid", "Jerry Craft", "9780062691194"),
        CuratedBook("The Parker Inheritance", "Varian Johnson", "9780545952781"),
    ),
    "stem": (
        CuratedBook("Rosie Revere, Engineer", "Andrea Beaty", "9781419708459"),
        CuratedBook("Ada Twist, Scientist", "Andrea Beaty", "9781419721373"),
        CuratedBook("The Most Magnificent Thing", "Ashley Spires", "9781554537044"),
        CuratedBook("Hidden Figures", "Margot Lee Shetterly", "9780062742469"),
        CuratedBook("What Do You Do with an Idea?", "Kobi Yamada", "9781938298073"),
        CuratedBook("The Boy Who Harnessed the Wind", "William Kamkwamba", "9780803735118"),
        CuratedBook("If You Decide to Go to the Moon", "Faith McNulty", "9780590483599"),
        CuratedBook("On a Beam of Light", "Jennifer Berne", "9780811872355"),
    ),
    "classics": (
        CuratedBook("Charlotte's Web", "E.B. White", "9780064400558"),
        CuratedBook("Where the Sidewalk Ends", "Shel Silverstein", "9780060256678"),
        CuratedBook("The Phantom Tollbooth", "Norton Juster", "9780394820378"),
        CuratedBook("A Wrinkle in Time", "Madeleine L'Engle", "9780374386139"),
        CuratedBook("The Secret Garden", "Frances Hodgson Burnett", "9780064401883"),
        CuratedBook("James and the Giant Peach", "Roald Dahl", "9780142410363"),
        CuratedBook("Matilda", "Roald Dahl", "9780142410370"),
        CuratedBook("The BFG", "Roald Dahl", "9780142410387"),
        CuratedBook("Stuart Little", "E.B. White", "9780064400565"),
        CuratedBook("The Cricket in Times Square", "George Selden", "9780312380038"),
    ),
    "rhyme": (
        CuratedBook("Chicka Chicka Boom Boom", "Bill Martin Jr.", "9781442450707"),
        CuratedBook("Llama Llama Red Pajama", "Anna Dewdney", "9780670059836"),
        CuratedBook("Each Peach Pear Plum", "Janet & Allan Ahlberg", "9780670882786"),
        CuratedBook("Room on the Broom", "Julia Donaldson", "9780142501122"),
        CuratedBook("Jamberry", "Bruce Degen", "9780694006519"),
        CuratedBook("Down by the Bay", "Raffi", "9780517566459"),
    ),
    "animalsounds": (
        CuratedBook("Brown Bear, Brown Bear, What Do You See?", "Bill Martin Jr.", "9780805047905"),
        CuratedBook("Moo, Baa, La La La!", "Sandra Boynton", "9780671449018"),
        CuratedBook("Click, Clack, Moo", "Doreen Cronin", "9780689832130"),
        CuratedBook("Polar Bear, Polar Bear, What Do You Hear?", "Bill Martin Jr.", "9780805053883"),
        CuratedBook("Dear Zoo", "Rod Campbell", "9781416947370"),
        CuratedBook("The Pout-Pout Fish", "Deborah Diesen", "9780374360979"),
    ),
    "labeling": (
        CuratedBook("First 100 Words", "Roger Priddy", "9780312510787"),
        CuratedBook("Baby Touch and Feel: Animals", "DK", "9780756634681"),
        CuratedBook("My First Word Book", "Angela Wilkes", "9781564582041"),
        CuratedBook("Toes, Ears, & Nose!", "Marion Dane Bauer", "9780689847127"),
        CuratedBook("From Head to Toe", "Eric Carle", "9780064435963"),
    ),
    "causeeffect": (
        CuratedBook("Dear Zoo", "Rod Campbell", "9781416947370"),
        CuratedBook("Where's Spot?", "Eric Hill", "9780399240461"),
        CuratedBook("Press Here", "Hervé Tullet", "9780811879545"),
        CuratedBook("Pat the Bunny", "Dorothy Kunhardt", "9780307120007"),
        CuratedBook("Peek-a-Who?", "Nina Laden", "9780811826020"),
    ),
    "patterns": (
        CuratedBook("The Very Hungry Caterpillar", "Eric Carle", "9780399226908"),
        CuratedBook("We're Going on a Bear Hunt", "Michael Rosen", "9780689853494"),
        CuratedBook("If You Give a Mouse a Cookie", "Laura Numeroff", "9780060245863"),
        CuratedBook("Brown Bear, Brown Bear, What Do You See?", "Bill Martin Jr.", "9780805047905"),
        CuratedBook("The Napping House", "Audrey Wood", "9780152567088"),
        CuratedBook("Goodnight Gorilla", "Peggy Rathmann", "9780399230035"),
    ),
    "earlymath": (
        CuratedBook("Ten Little Fingers and Ten Little Toes", "Mem Fox", "9780152060572"),
        CuratedBook("Chicka Chicka 1, 2, 3", "Bill Martin Jr.", "9780689858819"),
        CuratedBook("Mouse Count", "Ellen Stoll Walsh", "9780152002237"),
        CuratedBook("The Very Hungry Caterpillar", "Eric Carle", "9780399226908"),
        CuratedBook("Five Little Monkeys Jumping on the Bed", "Eileen Christelow", "9780395557013"),
    ),
    "bedtime": (
        CuratedBook("Goodnight Moon", "Margaret Wise Brown", "9780694003617"),
        CuratedBook("Time for Bed", "Mem Fox", "9780152010669"),
        CuratedBook("The Going to Bed Book", "Sandra Boynton", "9780671449025"),
        CuratedBook("Pajama Time!", "Sandra Boynton", "9780761119753"),
        CuratedBook("On the Night You Were Born", "Nancy Tillman", "9780312601553"),
    ),
    "emotions": (
        CuratedBook("Llama Llama Red Pajama", "Anna Dewdney", "9780670059836"),
        CuratedBook("The Feelings Book", "Todd Parr", "9780316012492"),
        CuratedBook("Grumpy Monkey", "Suzanne Lang", "9780553537864"),
        CuratedBook("In My Heart: A Book of Feelings", "Jo Witek", "9781419713101"),
        CuratedBook("The Color Monster", "Anna Llenas", "9780316450010"),
        CuratedBook("When Sophie Gets Angry", "Molly Bang", "9780590189798"),
    ),
})


SEASONAL_SHELVES: Mapping[str, tuple[CuratedBook, ...]] = MappingProxyType({
    "bhm": (
        CuratedBook("Hidden Figures", "Margot Lee Shetterly", "9780062742469"),
        CuratedBook("The Story of Ruby Bridges", "Robert Coles", "9780439472265"),
        CuratedBook("I Am Enough", "Grace Byers", "9780062667120"),
        CuratedBook("Crown: An Ode to the Fresh Cut", "Derrick Barnes", "9781572842243"),
        CuratedBook("Each Kindness", "Jacqueline Woodson", "9780399246524"),
        CuratedBook("Hair Love", "Matthew A. Cherry", "9780525553366"),
    ),
    "whm": (
        CuratedBook("She Persisted", "Chelsea Clinton", "9781524741723"),
        CuratedBook("Rosie Revere, Engineer", "Andrea Beaty", "9781419708459"),
        CuratedBook("Good Night Stories for Rebel Girls", "Elena Favilli", "9780997895810"),
        CuratedBook("Ada Twist, Scientist", "Andrea Beaty", "9781419721373"),
    ),
    "summer": (
        CuratedBook("The Vanderbeekers of 141st Street", "Karina Yan Glaser", "9781328499219"),
        CuratedBook("From the Mixed-Up Files", "E.L. Konigsburg", "9780689711817"),
        CuratedBook("The Lemonade War", "Jacqueline Davies", "9780547237657"),
        CuratedBook("Frog and Toad Are Friends", "Arnold Lobel", "9780064440202"),
    ),
    "winter": (
        CuratedBook("The Snowy Day", "Ezra Jack Keats", "9780670654000"),
        CuratedBook("Snow", "Uri Shulevitz", "9780374468620"),
        CuratedBook("The Mitten", "Jan Brett", "9780399219207"),
        CuratedBook("Owl Moon", "Jane Yolen", "9780399214578"),
    ),
    "backtoschool": (
        CuratedBook("The Kissing Hand", "Audrey Penn", "9780878685851"),
        CuratedBook("First Day Jitters", "Julie Danneberg", "9781580890540"),
        CuratedBook("The Name Jar", "Yangsook Choi", "9780440417996"),
        CuratedBook("Enemy Pie", "Derek Munson", "9780811827782"),
    ),
    "fall": (
        CuratedBook("Leaf Man", "Lois Ehlert", "9780152053048"),
        CuratedBook("Fletcher and the Falling Leaves", "Julia Rawlinson", "9780061573972"),
        CuratedBook("Room on the Broom", "Julia Donaldson", "9780142501122"),
    ),
    "gratitude": (
        CuratedBook("Bear Says Thank You", "Karma Wilson", "9781416928171"),
        CuratedBook("Those Shoes", "Maribeth Boelts", "9780763642846"),
        CuratedBook("The Giving Tree", "Shel Silverstein", "9780060256654"),
    ),
    "holiday": (
        CuratedBook("The Polar Express", "Chris Van Allsburg", "9780395389492"),
        CuratedBook("How the Grinch Stole Christmas", "Dr. Seuss", "9780394800790"),
        CuratedBook("The Night Before Christmas", "Clement C. Moore", "9780385376716"),
    ),
    "earth": (
        CuratedBook("The Lorax", "Dr. Seuss", "9780394823379"),
        CuratedBook("The Watcher", "Jeanette Winter", "9780375867743"),
        CuratedBook("We Are Water Protectors", "Carole Lindstrom", "9781250203557"),
    ),
})

# Month (1-12) -> seasonal shelf
SEASONAL_THEMES: Mapping[int, SeasonalTheme] = MappingProxyType({
    1: SeasonalTheme("winter", "Winter Reads"),
    2: SeasonalTheme("bhm", "Black History Month"),
    3: SeasonalTheme("whm", "Women's History Month"),
    4: SeasonalTheme("earth", "Earth Day Reads"),
    5: SeasonalTheme("summer", "Summer Reading Prep"),
    6: SeasonalTheme("summer", "Summer Reading Prep"),
    7: SeasonalTheme("summer", "Summer Reading"),
    8: SeasonalTheme("summer", "Summer Reading"),
    9: SeasonalTheme("backtoschool", "Back to School"),
    10: SeasonalTheme("fall", "Fall Favorites"),
    11: SeasonalTheme("gratitude", "Gratitude & Giving"),
    12: SeasonalTheme("holiday", "Holiday Reading"),
})


def seasonal_theme(month: int) -> SeasonalTheme:
    """Get the seasonal theme for a calendar month (1-12).

    Raises:
        ValueError: If month is out of range
    """
    try:
        return SEASONAL_THEMES[month]
    except KeyError:
        raise ValueError(f"Month must be 1-12, got {month}")


class CuratedCatalog:
    """Read-only view over curated shelves."""

    def __init__(
        self,
        shelves: Optional[Mapping[str, tuple[CuratedBook, ...]]] = None,
        seasonal_shelves: Optional[Mapping[str, tuple[CuratedBook, ...]]] = None,
    ):
        """Initialize catalog.

        Args:
            shelves: Named shelves (default: built-in shelves)
            seasonal_shelves: Seasonal shelves keyed by theme (default: built-in)
        """
        self._shelves = SHELVES if shelves is None else MappingProxyType(dict(shelves))
        self._seasonal = (
            SEASONAL_SHELVES if seasonal_shelves is None
            else MappingProxyType(dict(seasonal_shelves))
        )

    def shelves(self) -> list[str]:
        """List shelf names."""
        return list(self._shelves)

    def shelf(self, name: str) -> tuple[CuratedBook, ...]:
        """Get a shelf by name.

        Raises:
            KeyError: If there is no such shelf
        """
        return self._shelves[name]

    def seasonal(self, month: int) -> tuple[CuratedBook, ...]:
        """Get the seasonal shelf for a month, defaulting to summer."""
        theme = seasonal_theme(month)
        return self._seasonal.get(theme.key) or self._seasonal.get("summer", ())

    def all_books(self) -> list[CuratedBook]:
        """All books across every shelf, first occurrence wins per ISBN."""
        seen: set[str] = set()
        books = []
        for shelf in (*self._shelves.values(), *self._seasonal.values()):
            for book in shelf:
                if book.isbn13 not in seen:
                    seen.add(book.isbn13)
                    books.append(book)
        return books

    def find(self, query: str) -> list[CuratedBook]:
        """Case-insensitive substring match on title or author."""
        needle = (query or "").strip().lower()
        if not needle:
            return []
        return [
            book for book in self.all_books()
            if needle in book.title.lower() or needle in book.author.lower()
        ]
