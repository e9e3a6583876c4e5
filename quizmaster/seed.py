import logging

from sqlalchemy.ext.asyncio import AsyncSession

from quizmaster.services.catalog import CatalogStore
from quizmaster.services.credentials import CredentialStore

logger = logging.getLogger(__name__)

SEED_USERS = [
    {
        "username": "admin",
        "email": "admin@quizmaster.com",
        "password": "admin123",
        "first_name": "Admin",
        "last_name": "User",
        "role": "admin",
        "points": 5000,
        "streak": 30,
        "badges": ["admin", "founder", "expert"],
    },
    {
        "username": "johndoe",
        "email": "john.doe@email.com",
        "password": "user123",
        "first_name": "John",
        "last_name": "Doe",
        "role": "user",
        "points": 1250,
        "streak": 7,
        "badges": ["first_quiz", "streak_7", "expert_it"],
    },
]

SEED_THEMES = [
    {"name": "Informatique", "description": "Programmation, développement, et technologies modernes", "icon": "fas fa-laptop-code", "color": "blue"},
    {"name": "Sciences", "description": "Physique, chimie, biologie et découvertes scientifiques", "icon": "fas fa-flask", "color": "green"},
    {"name": "Littérature", "description": "Œuvres classiques, auteurs célèbres et poésie", "icon": "fas fa-book", "color": "purple"},
    {"name": "Histoire", "description": "Événements historiques, personnages et civilisations", "icon": "fas fa-landmark", "color": "yellow"},
    {"name": "Géographie", "description": "Pays, capitales, continents et merveilles naturelles", "icon": "fas fa-globe", "color": "indigo"},
    {"name": "Mathématiques", "description": "Algèbre, géométrie, statistiques et logique", "icon": "fas fa-calculator", "color": "red"},
    {"name": "Art et musique", "description": "Peinture, sculpture, musique classique et moderne", "icon": "fas fa-palette", "color": "pink"},
    {"name": "Cinéma et séries", "description": "Films, acteurs, réalisateurs et séries TV", "icon": "fas fa-film", "color": "orange"},
    {"name": "Sport et loisirs", "description": "Sports, jeux olympiques et activités de loisir", "icon": "fas fa-running", "color": "cyan"},
    {"name": "Culture générale", "description": "Connaissances générales sur le monde", "icon": "fas fa-brain", "color": "gray"},
    {"name": "Technologie et innovation", "description": "Innovations technologiques et découvertes", "icon": "fas fa-rocket", "color": "emerald"},
    {"name": "Santé et bien-être", "description": "Médecine, nutrition et bien-être", "icon": "fas fa-heart", "color": "rose"},
]

# theme name -> (question, options, correct answer index, difficulty, explanation)
SEED_QUESTIONS = {
    "Informatique": [
        ("Quel langage de programmation est principalement utilisé pour le développement web côté client ?",
         ["Python", "JavaScript", "Java", "C++"], 1, "easy",
         "JavaScript est le langage standard pour le développement web côté client."),
        ("Que signifie l'acronyme 'HTML' ?",
         ["Hypertext Markup Language", "High Tech Modern Language", "Home Tool Markup Language", "Hyperlink Text Management Language"], 0, "easy", None),
        ("Quel est le principe de base de la programmation orientée objet ?",
         ["L'encapsulation uniquement", "L'héritage, l'encapsulation et le polymorphisme", "Les variables globales", "Les fonctions récursives"], 1, "medium", None),
        ("Qu'est-ce qu'un algorithme de tri rapide (QuickSort) ?",
         ["Un tri par insertion", "Un tri par fusion", "Un tri par partitionnement", "Un tri par comptage"], 2, "medium", None),
    ],
    "Sciences": [
        ("Quelle est la formule chimique de l'eau ?", ["H2O", "CO2", "NaCl", "CH4"], 0, "easy", None),
        ("Combien de chromosomes possède un être humain normal ?", ["44", "46", "48", "50"], 1, "easy", None),
        ("Quelle est la vitesse de la lumière dans le vide ?",
         ["300 000 km/s", "150 000 km/s", "450 000 km/s", "600 000 km/s"], 0, "medium", None),
    ],
    "Littérature": [
        ("Qui a écrit 'Les Misérables' ?", ["Émile Zola", "Victor Hugo", "Gustave Flaubert", "Honoré de Balzac"], 1, "easy", None),
        ("Dans quelle ville se déroule l'action de 'Roméo et Juliette' ?", ["Rome", "Venise", "Vérone", "Florence"], 2, "medium", None),
        ("Quel est le premier livre de la saga 'Harry Potter' ?",
         ["La Chambre des secrets", "L'École des sorciers", "Le Prisonnier d'Azkaban", "La Coupe de feu"], 1, "easy", None),
    ],
    "Histoire": [
        ("En quelle année a eu lieu la Révolution française ?", ["1789", "1799", "1804", "1815"], 0, "easy", None),
        ("Qui était le premier empereur romain ?", ["Jules César", "Auguste", "Néron", "Trajan"], 1, "medium", None),
        ("Quelle guerre a opposé la France et la Prusse en 1870 ?",
         ["Guerre de Crimée", "Guerre franco-prussienne", "Guerre de Cent Ans", "Guerre de Sept Ans"], 1, "medium", None),
    ],
    "Géographie": [
        ("Quelle est la capitale de l'Australie ?", ["Sydney", "Melbourne", "Canberra", "Perth"], 2, "medium", None),
        ("Quel est le plus long fleuve du monde ?", ["Amazone", "Nil", "Mississippi", "Yangtsé"], 1, "easy", None),
        ("Dans quel pays se trouve le mont Everest ?", ["Inde", "Chine", "Népal", "Tibet"], 2, "easy", None),
    ],
    "Mathématiques": [
        ("Combien font 7 × 8 ?", ["54", "56", "58", "64"], 1, "easy", None),
        ("Quelle est la valeur de π (pi) arrondie à deux décimales ?", ["3,14", "3,15", "3,16", "3,17"], 0, "easy", None),
        ("Combien de côtés a un hexagone ?", ["5", "6", "7", "8"], 1, "easy", None),
    ],
    "Art et musique": [
        ("Qui a peint la 'Joconde' ?", ["Vincent van Gogh", "Pablo Picasso", "Léonard de Vinci", "Claude Monet"], 2, "easy",
         "La Joconde, ou Mona Lisa, est l'une des œuvres d'art les plus célèbres de Léonard de Vinci."),
        ("Quel compositeur a créé 'La Symphonie n° 5' ?",
         ["Wolfgang Amadeus Mozart", "Johann Sebastian Bach", "Ludwig van Beethoven", "Frédéric Chopin"], 2, "easy",
         "La Symphonie n° 5 en ut mineur, op. 67, est l'une des œuvres les plus célèbres de Beethoven."),
        ("Quel mouvement artistique est caractérisé par des formes géométriques et des couleurs vives ?",
         ["Impressionnisme", "Surréalisme", "Cubisme", "Romantisme"], 2, "medium",
         "Le Cubisme est un mouvement artistique du début du XXe siècle, fondé par Pablo Picasso et Georges Braque."),
    ],
    "Cinéma et séries": [
        ("Quel film a remporté l'Oscar du Meilleur Film en 2020 ?",
         ["1917", "Parasite", "Joker", "Once Upon a Time in Hollywood"], 1, "medium",
         "Le film sud-coréen 'Parasite' est le premier film non anglophone à remporter l'Oscar du Meilleur Film."),
        ("Qui est le réalisateur du film 'Inception' ?",
         ["Steven Spielberg", "Christopher Nolan", "Quentin Tarantino", "Martin Scorsese"], 1, "easy",
         "Christopher Nolan est réputé pour ses films complexes et novateurs, dont 'Inception'."),
        ("Dans la série 'Friends', quel est le nom du café où les personnages se retrouvent ?",
         ["Central Perk", "Monk's Diner", "The Peach Pit", "MacLaren's Pub"], 0, "easy",
         "Le Central Perk est le lieu de rassemblement emblématique de la bande d'amis."),
    ],
    "Sport et loisirs": [
        ("Combien de joueurs composent une équipe de football (soccer) sur le terrain ?", ["9", "10", "11", "12"], 2, "easy",
         "Une équipe de football est composée de 11 joueurs, y compris le gardien de but."),
        ("Quel pays a remporté le plus de médailles d'or aux Jeux Olympiques d'été ?",
         ["Chine", "Royaume-Uni", "États-Unis", "Russie"], 2, "medium",
         "Les États-Unis sont en tête du classement des médailles d'or olympiques."),
        ("Quel nageur est le plus médaillé de l'histoire des Jeux Olympiques ?",
         ["Ian Thorpe", "Mark Spitz", "Michael Phelps", "Ryan Lochte"], 2, "easy",
         "Michael Phelps détient le record du plus grand nombre de médailles olympiques."),
    ],
    "Culture générale": [
        ("Quel est le symbole chimique de l'or ?", ["Ag", "Au", "Fe", "Cu"], 1, "easy",
         "Au est le symbole de l'or dans le tableau périodique des éléments."),
        ("Combien de temps dure une année lumière ?",
         ["1 an", "10 ans", "La distance que la lumière parcourt en un an", "Cela varie"], 2, "easy",
         "Une année-lumière est une unité de distance, pas de temps, utilisée en astronomie."),
    ],
    "Technologie et innovation": [
        ("Quelle entreprise a développé le système d'exploitation Android ?", ["Apple", "Microsoft", "Google", "Samsung"], 2, "easy",
         "Android est un système d'exploitation mobile développé par Google."),
        ("Quel est le nom du premier navigateur web, créé par Tim Berners-Lee ?",
         ["Netscape Navigator", "Mosaic", "WorldWideWeb (Nexus)", "Internet Explorer"], 2, "hard",
         "WorldWideWeb, rebaptisé plus tard Nexus, a été le premier navigateur web développé."),
    ],
    "Santé et bien-être": [
        ("Quel est l'organe le plus grand du corps humain ?", ["Le foie", "Le cerveau", "La peau", "Les poumons"], 2, "easy",
         "La peau est l'organe le plus grand et le plus lourd du corps humain."),
        ("Quelle vitamine est essentielle pour la coagulation sanguine ?",
         ["Vitamine C", "Vitamine D", "Vitamine K", "Vitamine B12"], 2, "medium",
         "La vitamine K joue un rôle crucial dans la synthèse des protéines nécessaires à la coagulation."),
        ("Quel est le nom de l'hormone du sommeil ?", ["Adrénaline", "Insuline", "Mélatonine", "Cortisol"], 2, "easy",
         "La mélatonine est une hormone produite par le corps qui aide à réguler les cycles veille-sommeil."),
    ],
}


async def seed_database(db: AsyncSession) -> None:
    """Load the demo accounts, themes and questions into an empty store."""
    credentials = CredentialStore(db)
    catalog = CatalogStore(db)

    if await credentials.count_users() or await catalog.count_themes():
        logger.info("Store already populated, skipping seed data")
        return

    for user_data in SEED_USERS:
        await credentials.create_user(**user_data)

    question_count = 0
    for theme_data in SEED_THEMES:
        theme = await catalog.create_theme(theme_data)
        for text, options, correct_answer, difficulty, explanation in SEED_QUESTIONS.get(theme.name, []):
            await catalog.create_question(theme.id, {
                "question": text,
                "options": options,
                "correct_answer": correct_answer,
                "difficulty": difficulty,
                "explanation": explanation,
            })
            question_count += 1

    await db.commit()
    logger.info(
        f"Seeded {len(SEED_USERS)} users, {len(SEED_THEMES)} themes and {question_count} questions"
    )
